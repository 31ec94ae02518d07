"""Configuration models for the activity monitor."""

from pydantic import BaseModel, Field, field_validator

from ..monitor import DEFAULT_TIMEOUT


class MonitorConfig(BaseModel):
    """Settings for an activity monitor and its file watcher."""

    timeout: int = Field(default=DEFAULT_TIMEOUT, gt=0, description="Quiet period in milliseconds")
    include_patterns: list[str] = Field(default_factory=lambda: ["*"])
    exclude_patterns: list[str] = Field(
        default_factory=lambda: [".git/", "__pycache__/", "*.pyc", "*.swp", "*~"]
    )
    recursive: bool = True
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level
