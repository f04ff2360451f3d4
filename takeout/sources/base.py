"""Base content source interface."""

import abc
import logging

logger = logging.getLogger(__name__)


class BaseSource(abc.ABC):
    """Base class for all affirmation sources."""

    name: str = "source"

    @abc.abstractmethod
    async def fetch(self) -> list[str]:
        """Fetch affirmations from the source.

        Returns:
            Non-empty list of affirmation strings, in source order.

        Raises:
            ContentSourceError: the source produced nothing usable.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"
