"""Log severity levels and display intents.

Levels form a fixed total order used for filtering. Intents group levels
into the three prefixes shown in rendered output.
"""

from enum import Enum, IntEnum
from typing import Union


class LogLevel(IntEnum):
    """Log severity, ordered from most to least verbose."""

    VERBOSE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    @property
    def rank(self) -> int:
        """Position of this level in the filtering order."""
        return LOG_LEVEL_ORDER[self]

    @classmethod
    def parse(cls, value: Union["LogLevel", str, int]) -> "LogLevel":
        """Parse a level from its name, rank or an existing level.

        Names are case-insensitive; "warning" is accepted as an alias of "warn".

        Raises:
            ValueError: If the value does not name a level
        """
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().upper()
            name = _LEVEL_ALIASES.get(name, name)
            if name in cls.__members__:
                return cls[name]
        raise ValueError(
            f"Unknown log level: {value!r}. "
            f"Expected one of: {', '.join(level.name.lower() for level in cls)}"
        )

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


_LEVEL_ALIASES = {"WARNING": "WARN"}

# Every level must have a rank
LOG_LEVEL_ORDER: dict[LogLevel, int] = {
    LogLevel.VERBOSE: 0,
    LogLevel.DEBUG: 1,
    LogLevel.INFO: 2,
    LogLevel.WARN: 3,
    LogLevel.ERROR: 4,
}

DEFAULT_LOG_LEVEL = LogLevel.INFO


class LogIntent(Enum):
    """Display intent of a rendered message."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def prefix(self) -> str:
        """Token placed in front of every rendered message with this intent."""
        return _INTENT_PREFIXES[self]

    @classmethod
    def for_level(cls, level: LogLevel) -> "LogIntent":
        """Map a level to its intent (verbose/debug/info share INFO)."""
        if level >= LogLevel.ERROR:
            return cls.ERROR
        if level == LogLevel.WARN:
            return cls.WARNING
        return cls.INFO


# Consumers parse these tokens out of log output; do not change them.
_INTENT_PREFIXES = {
    LogIntent.INFO: "ℹ️",
    LogIntent.WARNING: "⚠️",
    LogIntent.ERROR: "😿‼️",
}
