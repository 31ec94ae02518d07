"""Activity monitor that signals once a burst of events settles."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .monitor_logging import get_logger
from .signaling import Signal
from .timers import AsyncioTimerService, TimerService

if TYPE_CHECKING:
    from .config import MonitorConfig

logger = get_logger()

S = TypeVar("S")
T = TypeVar("T")

DEFAULT_TIMEOUT = 1000


@dataclass(frozen=True)
class ActivityStoppedArgs(Generic[S, T]):
    """Payload of the last upstream emission before activity stopped."""

    sender: S
    args: T


class ActivityMonitor(Generic[S, T]):
    """Watch a signal and emit ``activity_stopped`` after a quiet period.

    Every emission of the watched signal re-arms a single timer of
    ``timeout`` milliseconds. When the timer fires, ``activity_stopped`` is
    emitted with the sender and args of the most recent emission.
    """

    def __init__(
        self,
        signal: Signal[S, T],
        timeout: int = DEFAULT_TIMEOUT,
        timer_service: TimerService | None = None,
    ):
        self._signal = signal
        self._timeout = timeout
        self._timers = timer_service or AsyncioTimerService()
        self._activity_stopped: Signal["ActivityMonitor[S, T]", ActivityStoppedArgs[S, T]] = Signal(self)
        self._timer: Any = None
        self._args: ActivityStoppedArgs[S, T] | None = None
        self._emissions = 0
        self._disposed = False

        signal.connect(self._on_signal_fired)

    @classmethod
    def from_config(
        cls,
        signal: Signal[S, T],
        config: "MonitorConfig",
        timer_service: TimerService | None = None,
    ) -> "ActivityMonitor[S, T]":
        """Create a monitor using the timeout from a MonitorConfig."""
        return cls(signal, timeout=config.timeout, timer_service=timer_service)

    @property
    def activity_stopped(
        self,
    ) -> Signal["ActivityMonitor[S, T]", ActivityStoppedArgs[S, T]]:
        """Signal emitted when activity has stopped."""
        return self._activity_stopped

    @property
    def timeout(self) -> int:
        """Quiet period in milliseconds. Changes apply to the next arm."""
        return self._timeout

    @timeout.setter
    def timeout(self, value: int) -> None:
        if self._disposed:
            return
        self._timeout = value

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def is_pending(self) -> bool:
        return self._timer is not None

    def dispose(self) -> None:
        """Release the upstream connection, pending timer and listeners."""
        if self._disposed:
            return
        self._signal.disconnect(self._on_signal_fired)
        self._timers.cancel(self._timer)
        self._timer = None
        self._args = None
        self._activity_stopped.disconnect_all()
        self._disposed = True
        logger.debug("Activity monitor disposed")

    def get_stats(self) -> dict[str, Any]:
        """Get monitor statistics."""
        return {
            "timeout": self._timeout,
            "pending": self.is_pending,
            "disposed": self._disposed,
            "emissions": self._emissions,
        }

    def _on_signal_fired(self, sender: S, args: T) -> None:
        if self._disposed:
            return
        self._timers.cancel(self._timer)
        self._timer = None
        self._args = ActivityStoppedArgs(sender, args)

        delay = self._timeout
        handle = None

        def fire() -> None:
            # Ignore a callback that was superseded or outlived disposal
            if self._disposed or self._timer is not handle:
                return
            payload = self._args
            self._timer = None
            self._args = None
            self._emissions += 1
            logger.debug(f"Activity stopped after {delay}ms quiet period")
            self._activity_stopped.emit(payload)

        handle = self._timers.schedule(fire, delay)
        self._timer = handle
        logger.debug(f"Armed activity timer for {delay}ms")
