"""Read affirmations from the static fallback JSON file."""

import json
import logging
from pathlib import Path

from takeout.errors import EmptyResult, MalformedResponse
from takeout.sources.base import BaseSource

logger = logging.getLogger(__name__)


class LocalSource(BaseSource):
    """Static ``{"affirmations": [...]}`` document on disk."""

    name = "local"

    def __init__(self, path: Path) -> None:
        self.path = path

    async def fetch(self) -> list[str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise MalformedResponse(f"Cannot read {self.path}: {e}") from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise MalformedResponse(f"Invalid JSON in {self.path}: {e}") from e

        items = data.get("affirmations") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise MalformedResponse(f"{self.path} has no 'affirmations' list")

        affirmations = [a for a in items if isinstance(a, str) and a.strip()]
        if not affirmations:
            raise EmptyResult(f"{self.path} has no usable affirmations")

        logger.info("Loaded %d affirmations from %s", len(affirmations), self.path)
        return affirmations
