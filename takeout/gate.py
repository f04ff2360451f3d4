"""Delayed reveal of the home-page controls."""

import logging
from collections.abc import Callable

from takeout.timers import OneShotTimer, Scheduler

logger = logging.getLogger(__name__)


class PresentationGate:
    """Flips ``visible`` to True once, ``delay`` seconds after ``arm``.

    Independent of data loading. ``reveal_now`` opens the gate immediately
    (used on exit to home) and ``cancel`` drops a pending reveal on unmount.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        delay: float = 5.0,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.visible = False
        self._on_change = on_change
        self._timer = OneShotTimer(scheduler, delay, self._reveal, name="presentation gate")

    @property
    def pending(self) -> bool:
        return self._timer.pending

    def arm(self) -> None:
        if self.visible:
            return
        self._timer.start()

    def reveal_now(self) -> None:
        self._timer.cancel()
        self._reveal()

    def cancel(self) -> None:
        self._timer.cancel()

    def _reveal(self) -> None:
        if self.visible:
            return
        self.visible = True
        logger.debug("Controls revealed")
        if self._on_change is not None:
            self._on_change()
