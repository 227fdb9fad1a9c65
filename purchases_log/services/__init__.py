"""Dispatcher and sinks."""

from purchases_log.services.log_dispatcher import (
    ErrorSink,
    LogDispatcher,
    MessageSink,
    get_log_dispatcher,
    render_message,
    reset_log_dispatcher,
)
from purchases_log.services.sinks import ConsoleSink, RecordingSink

__all__ = [
    "ErrorSink",
    "LogDispatcher",
    "MessageSink",
    "get_log_dispatcher",
    "render_message",
    "reset_log_dispatcher",
    "ConsoleSink",
    "RecordingSink",
]
