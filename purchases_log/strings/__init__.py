"""Message catalogs. Every member implements the LogMessage protocol."""

from purchases_log.strings.configure_strings import ConfigureStrings
from purchases_log.strings.error_strings import ErrorStrings

__all__ = [
    "ConfigureStrings",
    "ErrorStrings",
]
