"""Level-filtered dispatch of SDK log messages to caller-registered sinks.

Responsibilities:
- Hold the minimum log level and the two sink slots (message, error)
- Filter messages by level and render them with their intent prefix
- Forward error values, unchanged, to the error sink
- Provide the shared dispatcher instance and a reset for tests
"""

from threading import RLock
from typing import Callable, Optional, Union

from purchases_log.logging_config import get_logger
from purchases_log.models.levels import DEFAULT_LOG_LEVEL, LogIntent, LogLevel
from purchases_log.models.messages import LogMessage, as_log_message

logger = get_logger(__name__)

MessageSink = Callable[[LogLevel, str], None]
ErrorSink = Callable[[BaseException], None]


def render_message(level: LogLevel, message: LogMessage) -> str:
    """Render a message as "<intent prefix> <description>"."""
    return f"{LogIntent.for_level(level).prefix} {message.description}"


class LogDispatcher:
    """Filters log calls by level and fans them out to registered sinks.

    Both sinks are single slots: registering a handler replaces the previous
    one, registering ``None`` disables the channel. Every ``log`` call works
    on one snapshot of (level, message sink, error sink); sinks are invoked
    outside the lock so they may reconfigure the dispatcher.

    Error values are forwarded to the error sink whether or not the message
    itself passes the level filter.

    Args:
        level: initial minimum level
        message_sink: optional handler receiving ``(level, rendered_text)``
        error_sink: optional handler receiving error values
    """

    def __init__(
            self,
            level: LogLevel = DEFAULT_LOG_LEVEL,
            message_sink: Optional[MessageSink] = None,
            error_sink: Optional[ErrorSink] = None,
    ) -> None:
        self._lock = RLock()
        self._level = LogLevel.parse(level)
        self._message_sink = message_sink
        self._error_sink = error_sink

    @property
    def level(self) -> LogLevel:
        """Current minimum level."""
        with self._lock:
            return self._level

    @property
    def message_sink(self) -> Optional[MessageSink]:
        """Currently registered message sink, if any."""
        with self._lock:
            return self._message_sink

    @property
    def error_sink(self) -> Optional[ErrorSink]:
        """Currently registered error sink, if any."""
        with self._lock:
            return self._error_sink

    def set_level(self, level: Union[LogLevel, str]) -> None:
        """Replace the minimum level."""
        new_level = LogLevel.parse(level)
        with self._lock:
            self._level = new_level

    def set_message_sink(self, handler: Optional[MessageSink]) -> None:
        """Replace (or clear, with ``None``) the message sink."""
        with self._lock:
            self._message_sink = handler

    def set_error_sink(self, handler: Optional[ErrorSink]) -> None:
        """Replace (or clear, with ``None``) the error sink."""
        with self._lock:
            self._error_sink = handler

    def restore_defaults(self) -> None:
        """Reset the level to its default and clear both sinks."""
        with self._lock:
            self._level = DEFAULT_LOG_LEVEL
            self._message_sink = None
            self._error_sink = None

    def is_enabled_for(self, level: Union[LogLevel, str]) -> bool:
        """Whether a message at ``level`` passes the current filter."""
        return LogLevel.parse(level) >= self.level

    def log(
            self,
            level: Union[LogLevel, str],
            message: Union[LogMessage, str],
            error: Optional[BaseException] = None,
    ) -> None:
        """Dispatch a message.

        The message sink is called with the rendered text if ``level`` is at
        or above the current level. If ``error`` is given, the error sink is
        called with it unchanged.

        Args:
            level: Severity of the message
            message: LogMessage (or plain string) to render
            error: Optional error value to forward to the error sink
        """
        level = LogLevel.parse(level)

        with self._lock:
            min_level = self._level
            message_sink = self._message_sink
            error_sink = self._error_sink

        if message_sink is not None and level >= min_level:
            rendered = render_message(level, as_log_message(message))
            self._invoke(message_sink, "message", level, rendered)

        if error is not None and error_sink is not None:
            self._invoke(error_sink, "error", error)

    def verbose(self, message: Union[LogMessage, str]) -> None:
        self.log(LogLevel.VERBOSE, message)

    def debug(self, message: Union[LogMessage, str]) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: Union[LogMessage, str]) -> None:
        self.log(LogLevel.INFO, message)

    def warn(self, message: Union[LogMessage, str], error: Optional[BaseException] = None) -> None:
        self.log(LogLevel.WARN, message, error)

    def error(self, message: Union[LogMessage, str], error: Optional[BaseException] = None) -> None:
        self.log(LogLevel.ERROR, message, error)

    @staticmethod
    def _invoke(sink: Callable[..., None], channel: str, *args: object) -> None:
        """Call a sink, reporting (not propagating) its failures."""
        try:
            sink(*args)
        except Exception as e:
            logger.error(
                "log_sink_failed",
                channel=channel,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"LogDispatcher(level={self._level}, "
                f"message_sink={self._message_sink is not None}, "
                f"error_sink={self._error_sink is not None})"
            )


_log_dispatcher: Optional[LogDispatcher] = None
_dispatcher_lock = RLock()


def get_log_dispatcher() -> LogDispatcher:
    """Get or create the shared LogDispatcher instance.

    Returns:
        LogDispatcher singleton instance
    """
    global _log_dispatcher
    if _log_dispatcher is None:
        with _dispatcher_lock:
            if _log_dispatcher is None:
                _log_dispatcher = LogDispatcher()
    return _log_dispatcher


def reset_log_dispatcher() -> None:
    """Discard the shared LogDispatcher instance (for testing)."""
    global _log_dispatcher

    with _dispatcher_lock:
        if _log_dispatcher is not None:
            _log_dispatcher.restore_defaults()
            _log_dispatcher = None
