"""Pydantic models for the takeout app."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Page(str, Enum):
    HOME = "home"
    TAKEOUT = "takeout"
    COMPLETED = "completed"


class Origin(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"
    EXHAUSTED = "exhausted"


class LoadStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ResolvedContent(BaseModel):
    """Outcome of content resolution, tagged with where it came from."""
    model_config = ConfigDict(frozen=True)

    affirmations: tuple[str, ...] = ()
    origin: Origin
    failures: list[str] = Field(default_factory=list)

    @property
    def exhausted(self) -> bool:
        return self.origin is Origin.EXHAUSTED


class SessionView(BaseModel):
    """Immutable snapshot of controller state for the rendering layer."""
    model_config = ConfigDict(frozen=True)

    status: LoadStatus
    page: Page
    controls_visible: bool = False
    text: str | None = None
    position: int = 0
    total: int = 0
    viewed_count: int = 0
    can_go_back: bool = False
    can_go_forward: bool = False
    origin: Origin | None = None
    error: str | None = None
