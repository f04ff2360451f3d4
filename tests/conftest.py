"""Shared test fixtures for takeout tests."""

import json
import random

import pytest

from takeout.config import ApiConfig, Config, TimingConfig
from takeout.controller import TakeoutController
from takeout.models import Origin, ResolvedContent
from takeout.timers import Scheduler, TimerHandle


class ManualHandle(TimerHandle):
    def __init__(self, when: float, callback) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Virtual clock: callbacks fire only when the test calls ``advance``."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: list[ManualHandle] = []

    def call_later(self, delay, callback) -> ManualHandle:
        handle = ManualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[ManualHandle]:
        return [h for h in self.handles if not h.cancelled and h.callback is not None]

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = sorted(
                (h for h in self.pending if h.when <= target), key=lambda h: h.when,
            )
            if not due:
                break
            handle = due[0]
            self.now = handle.when
            callback, handle.callback = handle.callback, None
            callback()
        self.now = target


@pytest.fixture()
def scheduler():
    return ManualScheduler()


@pytest.fixture()
def fallback_file(tmp_path):
    path = tmp_path / "affirmations.json"
    path.write_text(json.dumps({"affirmations": ["X", "Y", "Z"]}))
    return path


@pytest.fixture()
def config(fallback_file):
    return Config(
        api=ApiConfig(url="http://sheets.test"),
        timing=TimingConfig(reveal_delay=5.0, completion_delay=0.5),
        fallback_path=str(fallback_file),
    )


@pytest.fixture()
def controller(config, scheduler):
    return TakeoutController(config, scheduler=scheduler, rng=random.Random(42))


def make_content(*items: str, origin: Origin = Origin.REMOTE) -> ResolvedContent:
    return ResolvedContent(affirmations=tuple(items), origin=origin)


@pytest.fixture()
def loaded_controller(controller):
    """Controller with three remote affirmations already resolved."""
    controller.set_content(make_content("First", "Second", "Third"))
    return controller
