"""Configuration loading for the takeout app."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

API_URL_ENV = "TAKEOUT_API_URL"


class ApiConfig(BaseModel):
    url: str = "http://localhost:7777"
    endpoint_path: str = "/getsheetsdata"
    timeout: float = 10.0
    column_index: int = Field(default=2, ge=0)  # column C of the sheet

    @field_validator("url")
    @classmethod
    def _strip_url(cls, value: str) -> str:
        return value.strip()


class TimingConfig(BaseModel):
    reveal_delay: float = Field(default=5.0, ge=0)
    completion_delay: float = Field(default=0.5, ge=0)


class Config(BaseModel):
    api: ApiConfig = Field(default_factory=ApiConfig)
    timing: TimingConfig = Field(default_factory=TimingConfig)
    fallback_path: str | None = None
    log_file: str = "takeout.log"

    @property
    def endpoint(self) -> str:
        return f"{self.api.url.rstrip('/')}/{self.api.endpoint_path.lstrip('/')}"

    @property
    def resolved_fallback_path(self) -> Path:
        """Local fallback dataset; the packaged list unless overridden."""
        if self.fallback_path is None:
            return Path(__file__).parent / "data" / "affirmations.json"
        return Path(self.fallback_path).expanduser()


def _project_root() -> Path:
    """Return the takeout project root directory."""
    return Path(__file__).parent.parent


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML file. Falls back to defaults if file missing.

    ``TAKEOUT_API_URL`` in the environment overrides ``api.url``.
    """
    if config_path is None:
        config_path = _project_root() / "config.yaml"

    raw: dict[str, Any] = {}
    if config_path.exists():
        raw = yaml.safe_load(config_path.read_text()) or {}

    env_url = os.environ.get(API_URL_ENV)
    if env_url:
        raw["api"] = {**(raw.get("api") or {}), "url": env_url}

    return Config(**raw)
