"""Configuration package."""

from .config_loader import ConfigError, ConfigLoader, load_config
from .models import MonitorConfig

__all__ = [
    "MonitorConfig",
    "ConfigLoader",
    "ConfigError",
    "load_config",
]
