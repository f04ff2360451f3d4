"""Page and progress tracking for the takeout flow.

Pure state: no timers and no I/O. The controller decides when a session
that ``is_complete`` actually moves to the completed page.
"""

import logging
import random

from takeout.errors import InvalidTransition
from takeout.models import Page
from takeout.shuffle import shuffle_indices

logger = logging.getLogger(__name__)


class TakeoutSession:
    """Current page, shuffled order, position and viewed set.

    ``viewed`` holds original indices, not shuffled positions. It only ever
    grows during a session: stepping back does not un-view.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.page = Page.HOME
        self.size = 0
        self.order: list[int] = []
        self.position = 0
        self.viewed: set[int] = set()

    def __repr__(self) -> str:
        return (
            f"TakeoutSession(page={self.page.value}, position={self.position}, "
            f"viewed={len(self.viewed)}/{self.size})"
        )

    # --- Queries ---

    @property
    def current_index(self) -> int | None:
        """Original index on display, or None when there is nothing to show."""
        if self.page is not Page.TAKEOUT or not self.order:
            return None
        return self.order[self.position]

    @property
    def can_go_back(self) -> bool:
        return self.page is Page.TAKEOUT and bool(self.order) and self.position > 0

    @property
    def can_go_forward(self) -> bool:
        return self.page is Page.TAKEOUT and self.position < len(self.order) - 1

    @property
    def is_complete(self) -> bool:
        return self.page is Page.TAKEOUT and self.size > 0 and len(self.viewed) == self.size

    # --- Transitions ---

    def start(self, size: int, order: list[int] | None = None) -> None:
        """Enter the takeout page with a fresh order (home or completed → takeout).

        ``size == 0`` leaves an empty takeout page awaiting data.
        """
        if self.page is Page.TAKEOUT and self.order:
            raise InvalidTransition("A takeout session is already running")
        if order is None:
            order = shuffle_indices(size, self._rng)
        elif sorted(order) != list(range(size)):
            raise ValueError(f"Order is not a permutation of range({size}): {order}")

        self.page = Page.TAKEOUT
        self.size = size
        self.order = list(order)
        self.position = 0
        self.viewed = {self.order[0]} if self.order else set()
        logger.debug("Session started: %d items, order=%s", size, self.order)

    def advance(self) -> bool:
        """Step forward one position. Returns False at the last position."""
        self._require(Page.TAKEOUT, "advance")
        if not self.can_go_forward:
            return False
        self.position += 1
        self.viewed.add(self.order[self.position])
        return True

    def retreat(self) -> bool:
        """Step back one position. Returns False at the first position."""
        self._require(Page.TAKEOUT, "go back")
        if not self.can_go_back:
            return False
        self.position -= 1
        return True

    def complete(self) -> bool:
        """Move to the completed page. Idempotent; False if not applied."""
        if self.page is Page.COMPLETED or not self.is_complete:
            return False
        self.page = Page.COMPLETED
        self._clear_progress()
        logger.debug("Session completed")
        return True

    def exit(self) -> None:
        """completed → home."""
        self._require(Page.COMPLETED, "exit")
        self.page = Page.HOME
        self._clear_progress()

    def _clear_progress(self) -> None:
        self.order = []
        self.position = 0
        self.viewed = set()

    def _require(self, page: Page, action: str) -> None:
        if self.page is not page:
            raise InvalidTransition(f"Cannot {action} from the {self.page.value} page")
