"""Timer services used to schedule delayed callbacks."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable


class TimerService(ABC):
    """Schedule-after-delay and cancel primitives."""

    @abstractmethod
    def schedule(self, callback: Callable[[], None], delay_ms: int) -> Any:
        """Run ``callback`` after ``delay_ms`` milliseconds. Returns a handle."""
        pass

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Cancel a handle. Safe for fired, cancelled or None handles."""
        pass


class AsyncioTimerService(TimerService):
    """Timer service backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def schedule(
        self, callback: Callable[[], None], delay_ms: int
    ) -> asyncio.TimerHandle:
        return self.loop.call_later(delay_ms / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle | None) -> None:
        if handle is not None:
            handle.cancel()
