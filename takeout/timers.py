"""Fire-once, cancellable timers on the event loop."""

import abc
import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class TimerHandle(abc.ABC):
    @abc.abstractmethod
    def cancel(self) -> None:
        ...


class Scheduler(abc.ABC):
    """Schedules callbacks after a delay in seconds."""

    @abc.abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class AsyncioScheduler(Scheduler):
    """Schedules on the running asyncio loop (textual's loop at runtime)."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        # asyncio.TimerHandle already provides cancel()
        return asyncio.get_running_loop().call_later(delay, callback)  # type: ignore[return-value]


class OneShotTimer:
    """A timer that fires its callback at most once per ``start``.

    ``start`` while pending is a no-op; ``cancel`` drops a pending callback
    so nothing stale fires after the owning state is left.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        delay: float,
        callback: Callable[[], None],
        name: str = "timer",
    ) -> None:
        self._scheduler = scheduler
        self.delay = delay
        self._callback = callback
        self.name = name
        self._handle: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self) -> bool:
        """Arm the timer. Returns False if it was already pending."""
        if self._handle is not None:
            return False
        logger.debug("Arming %s (%.2fs)", self.name, self.delay)
        self._handle = self._scheduler.call_later(self.delay, self._fire)
        return True

    def cancel(self) -> None:
        if self._handle is not None:
            logger.debug("Cancelling %s", self.name)
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        if self._handle is None:
            return
        self._handle = None
        self._callback()
