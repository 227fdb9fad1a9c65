"""Logging settings model, loaded from config/logging.yaml."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from purchases_log.models.levels import DEFAULT_LOG_LEVEL, LogLevel


class LoggingSettings(BaseModel):
    """Validated logging configuration."""

    log_level: LogLevel = Field(default=DEFAULT_LOG_LEVEL, description="Minimum level dispatched to sinks")
    log_format: Literal["json", "console"] = Field(
        default="console", description="Renderer used by the console sink"
    )
    console_sink: bool = Field(default=True, description="Install the structlog console sink")
    include_timestamp: bool = Field(default=True, description="Include ISO8601 timestamps in console output")

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, value: Any) -> LogLevel:
        return LogLevel.parse(value)

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalize_log_format(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value
