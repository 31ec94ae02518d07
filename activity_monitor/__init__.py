"""Activity monitor: emit a single signal once a burst of events settles."""

from .config import ConfigError, MonitorConfig, load_config
from .monitor import DEFAULT_TIMEOUT, ActivityMonitor, ActivityStoppedArgs
from .signaling import Signal
from .timers import AsyncioTimerService, TimerService

__version__ = "1.0.0"

__all__ = [
    "ActivityMonitor",
    "ActivityStoppedArgs",
    "DEFAULT_TIMEOUT",
    "Signal",
    "TimerService",
    "AsyncioTimerService",
    "MonitorConfig",
    "ConfigError",
    "load_config",
]
