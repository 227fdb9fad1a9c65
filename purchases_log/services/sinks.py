"""Message and error sinks for LogDispatcher.

- ConsoleSink writes rendered messages through structlog
- RecordingSink keeps everything it receives, for assertions in tests
"""

from threading import RLock
from typing import Optional, Union

from purchases_log.logging_config import get_logger
from purchases_log.models.levels import LogLevel
from purchases_log.models.messages import LoggedEntry, LogMessage
from purchases_log.services.log_dispatcher import LogDispatcher, render_message

# structlog method used for each dispatcher level
_STRUCTLOG_METHODS = {
    LogLevel.VERBOSE: "debug",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
}


class ConsoleSink:
    """Message sink writing rendered text to a structlog logger.

    Args:
        logger_name: Name of the structlog logger to write to
    """

    def __init__(self, logger_name: str = "purchases") -> None:
        self._logger_name = logger_name
        self._logger = get_logger(logger_name)

    @property
    def logger_name(self) -> str:
        return self._logger_name

    def __call__(self, level: LogLevel, message: str) -> None:
        method = getattr(self._logger, _STRUCTLOG_METHODS[level])
        method(message, log_level=str(level))

    def __repr__(self) -> str:
        return f"ConsoleSink(logger_name={self._logger_name!r})"


class RecordingSink:
    """Captures dispatched messages and forwarded errors.

    Register both channels with ``install``; the bound methods
    ``record_message`` and ``record_error`` can also be registered directly.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._entries: list[LoggedEntry] = []
        self._errors: list[BaseException] = []

    def install(self, dispatcher: LogDispatcher) -> "RecordingSink":
        """Register this sink as both the message and error sink."""
        dispatcher.set_message_sink(self.record_message)
        dispatcher.set_error_sink(self.record_error)
        return self

    def record_message(self, level: LogLevel, message: str) -> None:
        with self._lock:
            self._entries.append(LoggedEntry(level=level, message=message))

    def record_error(self, error: BaseException) -> None:
        with self._lock:
            self._errors.append(error)

    @property
    def entries(self) -> list[LoggedEntry]:
        """Recorded messages, in dispatch order."""
        with self._lock:
            return list(self._entries)

    @property
    def errors(self) -> list[BaseException]:
        """Forwarded errors, in dispatch order."""
        with self._lock:
            return list(self._errors)

    def messages_at(self, level: LogLevel) -> list[str]:
        """Rendered messages recorded at exactly ``level``."""
        return [entry.message for entry in self.entries if entry.level == level]

    def count(self, message: Union[LogMessage, str], level: Optional[LogLevel] = None) -> int:
        """Count recorded entries whose text contains the message description.

        Args:
            message: LogMessage or plain text to look for
            level: If given, only entries at this level are counted
        """
        text = message if isinstance(message, str) else message.description
        return sum(
            1
            for entry in self.entries
            if text in entry.message and (level is None or entry.level == level)
        )

    def was_logged(self, message: LogMessage, level: LogLevel) -> bool:
        """Whether ``message`` was recorded at ``level`` with its exact rendering."""
        expected = LoggedEntry(level=level, message=render_message(level, message))
        return expected in self.entries

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._errors.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
