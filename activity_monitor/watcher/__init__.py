"""File watching package for debounced activity detection."""

from .file_watcher import FileWatcher
from .handler import FileActivity, SignalEventHandler

__all__ = [
    "FileWatcher",
    "FileActivity",
    "SignalEventHandler",
]
