"""Directory watcher that reports when file activity settles."""

import asyncio
from pathlib import Path

from watchdog.observers import Observer

from ..config import MonitorConfig
from ..monitor import ActivityMonitor
from ..monitor_logging import get_logger
from ..signaling import Signal
from ..timers import AsyncioTimerService
from .handler import FileActivity, SignalEventHandler

logger = get_logger()


class FileWatcher:
    """Watch a directory tree and debounce its changes.

    ``changed`` fires for every accepted file event; ``monitor.activity_stopped``
    fires once a burst of changes has been quiet for ``config.timeout`` ms.
    """

    def __init__(
        self,
        path: Path,
        config: MonitorConfig | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        self.path = Path(path).resolve()
        self.config = config or MonitorConfig()
        self.loop = loop or asyncio.get_running_loop()
        self.changed: Signal["FileWatcher", FileActivity] = Signal(self)
        self.monitor: ActivityMonitor["FileWatcher", FileActivity] = (
            ActivityMonitor.from_config(
                self.changed, self.config, AsyncioTimerService(self.loop)
            )
        )
        self._observer = None

    @property
    def is_running(self) -> bool:
        return self._observer is not None

    def start(self) -> None:
        """Start the observer thread."""
        if self._observer is not None:
            return
        if self.monitor.is_disposed:
            raise RuntimeError("FileWatcher cannot be restarted after stop()")
        if not self.path.is_dir():
            raise FileNotFoundError(f"Not a directory: {self.path}")

        handler = SignalEventHandler(
            self.changed,
            self.path,
            self.config.include_patterns,
            self.config.exclude_patterns,
            self.loop,
        )
        observer = Observer()
        observer.schedule(handler, str(self.path), recursive=self.config.recursive)
        observer.start()
        self._observer = observer
        logger.info(f"Watching {self.path} (timeout {self.monitor.timeout}ms)")

    def stop(self) -> None:
        """Stop the observer and dispose the monitor."""
        observer = self._halt()
        if observer is not None:
            observer.join(timeout=2.0)
        self.monitor.dispose()

    async def aclose(self) -> None:
        """Like stop(), but joins the observer thread off the event loop."""
        observer = self._halt()
        if observer is not None:
            await asyncio.to_thread(observer.join, 2.0)
        self.monitor.dispose()

    def _halt(self):
        observer, self._observer = self._observer, None
        if observer is not None:
            observer.stop()
            logger.info(f"Stopped watching {self.path}")
        return observer
