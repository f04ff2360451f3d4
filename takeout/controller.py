"""Owns app state and turns user actions into published view snapshots."""

import logging
import random
from collections.abc import Callable

from takeout.config import Config
from takeout.errors import InvalidTransition
from takeout.gate import PresentationGate
from takeout.models import LoadStatus, Page, ResolvedContent, SessionView
from takeout.resolver import resolve_content
from takeout.session import TakeoutSession
from takeout.timers import AsyncioScheduler, OneShotTimer, Scheduler

logger = logging.getLogger(__name__)

Listener = Callable[[SessionView], None]


class TakeoutController:
    """Single owner of content, session, presentation gate and completion timer.

    The rendering layer subscribes to snapshots and calls the action methods;
    all mutation happens here, on the event loop.
    """

    def __init__(
        self,
        config: Config,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        scheduler = scheduler or AsyncioScheduler()
        self.status = LoadStatus.LOADING
        self.content: ResolvedContent | None = None
        self.session = TakeoutSession(rng)
        self.gate = PresentationGate(
            scheduler, config.timing.reveal_delay, on_change=self._publish,
        )
        self._completion = OneShotTimer(
            scheduler, config.timing.completion_delay, self._on_completion_due,
            name="completion",
        )
        self._listeners: list[Listener] = []

    @property
    def affirmations(self) -> tuple[str, ...]:
        return self.content.affirmations if self.content else ()

    # --- Subscription ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def view(self) -> SessionView:
        session = self.session
        index = session.current_index
        return SessionView(
            status=self.status,
            page=session.page,
            controls_visible=self.gate.visible,
            text=self.affirmations[index] if index is not None else None,
            position=session.position,
            total=len(session.order),
            viewed_count=len(session.viewed),
            can_go_back=session.can_go_back,
            can_go_forward=session.can_go_forward,
            origin=self.content.origin if self.content else None,
            error=self._error_message(),
        )

    # --- Lifecycle ---

    def mount(self) -> None:
        """Arm the presentation gate. Data loading is started separately."""
        self.gate.arm()

    def unmount(self) -> None:
        self.gate.cancel()
        self._completion.cancel()

    async def load(self) -> ResolvedContent:
        content = await resolve_content(self.config)
        self.set_content(content)
        return content

    def set_content(self, content: ResolvedContent) -> None:
        """Freeze the resolved list for the rest of the process."""
        if self.content is not None:
            raise RuntimeError("Content has already been resolved")
        self.content = content
        if content.exhausted:
            self.status = LoadStatus.ERROR
        else:
            self.status = LoadStatus.READY
            logger.info(
                "Loaded %d affirmations (%s)", len(content.affirmations), content.origin.value,
            )
            # An empty takeout page was waiting for data
            if self.session.page is Page.TAKEOUT and not self.session.order:
                self.session.start(len(content.affirmations))
                self._check_completion()
        self._publish()

    # --- Actions ---

    def start(self) -> None:
        """home → takeout."""
        self.session.start(len(self.affirmations))
        logger.info("Takeout session started with %d affirmations", self.session.size)
        self._check_completion()
        self._publish()

    def next(self) -> bool:
        moved = self.session.advance()
        if moved:
            self._check_completion()
            self._publish()
        return moved

    def previous(self) -> bool:
        moved = self.session.retreat()
        if moved:
            self._publish()
        return moved

    def repeat(self) -> None:
        """completed → takeout with a fresh order."""
        if self.session.page is not Page.COMPLETED:
            raise InvalidTransition(f"Cannot repeat from the {self.session.page.value} page")
        self.start()

    def exit(self) -> None:
        """completed → home, with the controls shown immediately."""
        self.session.exit()
        self._completion.cancel()
        self.gate.reveal_now()
        self._publish()

    # --- Internals ---

    def _check_completion(self) -> None:
        if self.session.is_complete:
            self._completion.start()

    def _on_completion_due(self) -> None:
        if self.session.complete():
            logger.info("All %d affirmations viewed", self.session.size)
            self._publish()

    def _error_message(self) -> str | None:
        if self.status is not LoadStatus.ERROR or self.content is None:
            return None
        if self.content.failures:
            return "; ".join(self.content.failures)
        return "No affirmations available"

    def _publish(self) -> None:
        snapshot = self.view()
        for listener in list(self._listeners):
            listener(snapshot)
