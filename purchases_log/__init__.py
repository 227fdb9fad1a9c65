"""Logging layer of an in-app purchase SDK.

Level-filtered dispatch of SDK log messages to swappable message and error
sinks, plus the SDK error values and subscription period formatting that
report through it.
"""

from purchases_log.errors import ErrorCode, PurchasesError
from purchases_log.models import (
    LoggedEntry,
    LogIntent,
    LogLevel,
    LogMessage,
    StringMessage,
)
from purchases_log.services import (
    ConsoleSink,
    LogDispatcher,
    RecordingSink,
    get_log_dispatcher,
    reset_log_dispatcher,
)

__version__ = "0.1.0"

__all__ = [
    "ConsoleSink",
    "ErrorCode",
    "LogDispatcher",
    "LogIntent",
    "LogLevel",
    "LogMessage",
    "LoggedEntry",
    "PurchasesError",
    "RecordingSink",
    "StringMessage",
    "get_log_dispatcher",
    "reset_log_dispatcher",
]
