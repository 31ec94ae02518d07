"""Shared fixtures for activity monitor tests."""

import logging

import pytest

from activity_monitor import Signal
from activity_monitor.timers import TimerService


class FakeTimer:
    def __init__(self, due: int, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False


class FakeTimerService(TimerService):
    """Timer service driven by a virtual millisecond clock."""

    def __init__(self):
        self.now = 0
        self.timers: list[FakeTimer] = []
        self.cancel_calls = 0

    def schedule(self, callback, delay_ms):
        timer = FakeTimer(self.now + delay_ms, callback)
        self.timers.append(timer)
        return timer

    def cancel(self, handle):
        self.cancel_calls += 1
        if handle is not None:
            handle.cancelled = True

    @property
    def live(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, ms: int) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.now + ms
        while True:
            due = [t for t in self.live if t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.now = timer.due
            timer.fired = True
            timer.callback()
        self.now = target


class Producer:
    def __init__(self):
        self.one: Signal["Producer", int] = Signal(self)
        self.two: Signal["Producer", list[str]] = Signal(self)


@pytest.fixture
def timers() -> FakeTimerService:
    return FakeTimerService()


@pytest.fixture
def producer() -> Producer:
    return Producer()


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo any setup_logging() so caplog keeps seeing records."""
    yield
    logger = logging.getLogger("activity_monitor")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
