"""Watchdog handler that republishes file events on a Signal."""

import asyncio
from dataclasses import dataclass
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from ..monitor_logging import get_logger
from ..signaling import Signal
from .file_utils import should_process_file

logger = get_logger()


@dataclass(frozen=True)
class FileActivity:
    """A single file system change."""

    event_type: str
    path: Path


class SignalEventHandler(FileSystemEventHandler):
    """Forward file events from the observer thread onto an event loop."""

    def __init__(
        self,
        signal: Signal,
        project_path: Path,
        include_patterns: list[str],
        exclude_patterns: list[str],
        loop: asyncio.AbstractEventLoop,
    ):
        super().__init__()
        self.signal = signal
        self.project_path = project_path
        self.include_patterns = include_patterns
        self.exclude_patterns = exclude_patterns
        self.loop = loop

    def on_created(self, event: FileSystemEvent) -> None:
        self._forward(event, event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._forward(event, event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._forward(event, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._forward(event, event.dest_path)

    def _forward(self, event: FileSystemEvent, raw_path) -> None:
        if event.is_directory:
            return
        if isinstance(raw_path, bytes):
            raw_path = raw_path.decode()
        path = Path(raw_path)
        if not should_process_file(
            path, self.project_path, self.include_patterns, self.exclude_patterns
        ):
            return

        activity = FileActivity(event.event_type, path)
        try:
            self.loop.call_soon_threadsafe(self.signal.emit, activity)
        except RuntimeError:
            logger.debug(f"Dropping {activity.event_type} for {path}: loop closed")
