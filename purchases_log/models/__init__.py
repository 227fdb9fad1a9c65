"""Models for log levels, messages, settings and subscription periods."""

from .levels import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ORDER,
    LogIntent,
    LogLevel,
)
from .messages import (
    LoggedEntry,
    LogMessage,
    StringMessage,
    as_log_message,
)
from .period import (
    PeriodUnit,
    SubscriptionPeriod,
)
from .settings import LoggingSettings

__all__ = [
    # Levels
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ORDER",
    "LogIntent",
    "LogLevel",
    # Messages
    "LoggedEntry",
    "LogMessage",
    "StringMessage",
    "as_log_message",
    # Periods
    "PeriodUnit",
    "SubscriptionPeriod",
    # Settings
    "LoggingSettings",
]
