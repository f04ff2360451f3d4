"""Affirmation sources: the sheets endpoint and the packaged fallback list."""

from takeout.sources.base import BaseSource
from takeout.sources.local import LocalSource
from takeout.sources.remote import RemoteSource

__all__ = ["BaseSource", "LocalSource", "RemoteSource"]
