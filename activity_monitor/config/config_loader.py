"""Load MonitorConfig from a JSON file, the environment and overrides."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..monitor_logging import get_logger
from .models import MonitorConfig

logger = get_logger()

TIMEOUT_ENV_VAR = "ACTIVITY_MONITOR_TIMEOUT"


class ConfigError(ValueError):
    """Raised when configuration cannot be loaded or is invalid."""


class ConfigLoader:
    """Merges configuration sources, later sources winning."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path else None

    def _load_file(self) -> dict[str, Any]:
        if self.config_path is None:
            return {}
        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to read config {self.config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {self.config_path} must contain a JSON object")
        logger.debug(f"Loaded config from {self.config_path}")
        return data

    def _load_env(self) -> dict[str, Any]:
        value = os.environ.get(TIMEOUT_ENV_VAR)
        if value is None:
            return {}
        return {"timeout": value}

    def load(self, **overrides: Any) -> MonitorConfig:
        """Build a validated MonitorConfig."""
        data = self._load_file()
        explicit = {k: v for k, v in overrides.items() if v is not None}
        if "timeout" not in explicit:
            data.update(self._load_env())
        data.update(explicit)

        try:
            return MonitorConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(config_path: Path | None = None, **overrides: Any) -> MonitorConfig:
    """Load configuration from file, environment and keyword overrides."""
    return ConfigLoader(config_path).load(**overrides)
