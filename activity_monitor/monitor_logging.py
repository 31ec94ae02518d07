"""Centralized logging configuration for the activity monitor."""

import logging
from pathlib import Path

LOGGER_NAME = "activity_monitor"


def setup_logging(
    level: str = "INFO",
    quiet: bool = False,
    verbose: bool = False,
    log_file: Path | None = None,
) -> "logging.Logger":
    """Setup global logging configuration."""
    import logging.config

    # Determine effective level
    if quiet:
        effective_level = "ERROR"
    elif verbose:
        effective_level = "DEBUG"
    else:
        effective_level = level.upper()

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {"format": "%(levelname)s | %(message)s"},
        },
        "handlers": {},
        "loggers": {
            LOGGER_NAME: {"handlers": [], "level": "DEBUG", "propagate": False}
        },
    }

    if not quiet:
        config["handlers"]["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "simple",
            "level": effective_level,
            "stream": "ext://sys.stderr",
        }
        config["loggers"][LOGGER_NAME]["handlers"].append("console")

    # File handler with rotation
    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "detailed",
            "level": "DEBUG",
            "filename": str(log_file),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 7,
        }
        config["loggers"][LOGGER_NAME]["handlers"].append("file")

    logging.config.dictConfig(config)
    return logging.getLogger(LOGGER_NAME)


def get_logger() -> "logging.Logger":
    """Get the global logger instance."""
    return logging.getLogger(LOGGER_NAME)
