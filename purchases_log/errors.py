"""SDK error values.

Errors are created through the factory functions below, which log the
error's description and forward the error itself to the dispatcher's error
sink, exactly once per created error.
"""

from enum import IntEnum
from typing import Optional

from purchases_log.models.levels import LogLevel
from purchases_log.services.log_dispatcher import LogDispatcher, get_log_dispatcher
from purchases_log.strings.error_strings import ErrorStrings


class ErrorCode(IntEnum):
    """Public error codes."""

    UNKNOWN = 0  # Unclassified failure
    PURCHASE_CANCELLED = 1  # User cancelled the purchase
    STORE_PROBLEM = 2  # The store reported a problem
    NETWORK = 10  # Request could not be completed
    INVALID_CREDENTIALS = 11  # API key rejected
    UNEXPECTED_BACKEND_RESPONSE = 12  # Backend response could not be parsed
    CONFIGURATION = 23  # SDK misconfigured
    CUSTOMER_INFO = 28  # Customer info could not be computed

    @property
    def description(self) -> str:
        """Human-readable description of the code."""
        return _CODE_DESCRIPTIONS[self]


_CODE_DESCRIPTIONS = {
    ErrorCode.UNKNOWN: ErrorStrings.UNKNOWN_ERROR.description,
    ErrorCode.PURCHASE_CANCELLED: ErrorStrings.PURCHASE_CANCELLED.description,
    ErrorCode.STORE_PROBLEM: "There was a problem with the store.",
    ErrorCode.NETWORK: ErrorStrings.NETWORK_ERROR.description,
    ErrorCode.INVALID_CREDENTIALS: "There was a credentials issue. Check the underlying error for more details.",
    ErrorCode.UNEXPECTED_BACKEND_RESPONSE: ErrorStrings.UNEXPECTED_BACKEND_RESPONSE.description,
    ErrorCode.CONFIGURATION: ErrorStrings.CONFIGURATION_ERROR.description,
    ErrorCode.CUSTOMER_INFO: ErrorStrings.CUSTOMER_INFO_ERROR.description,
}


class PurchasesError(Exception):
    """Base error raised and reported by the SDK.

    Args:
        code: Public error code
        message: Optional detail appended to the code description
        underlying_error: Optional error that caused this one
    """

    def __init__(
            self,
            code: ErrorCode,
            message: Optional[str] = None,
            underlying_error: Optional[BaseException] = None,
    ) -> None:
        self.code = ErrorCode(code)
        self.message = message
        self.underlying_error = underlying_error
        super().__init__(self.localized_description)

    @property
    def localized_description(self) -> str:
        if self.message:
            return f"{self.code.description} {self.message}"
        return self.code.description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PurchasesError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __repr__(self) -> str:
        return f"PurchasesError(code={self.code.name}, message={self.message!r})"


def _error(
        code: ErrorCode,
        message: Optional[str],
        underlying_error: Optional[BaseException],
        dispatcher: Optional[LogDispatcher],
        level: LogLevel = LogLevel.ERROR,
) -> PurchasesError:
    error = PurchasesError(code, message=message, underlying_error=underlying_error)
    (dispatcher or get_log_dispatcher()).log(level, error.localized_description, error)
    return error


def customer_info_error(
        message: Optional[str] = None,
        error: Optional[BaseException] = None,
        dispatcher: Optional[LogDispatcher] = None,
) -> PurchasesError:
    """Create (and report) an error for customer info that could not be computed."""
    return _error(ErrorCode.CUSTOMER_INFO, message, error, dispatcher)


def network_error(
        message: Optional[str] = None,
        error: Optional[BaseException] = None,
        dispatcher: Optional[LogDispatcher] = None,
) -> PurchasesError:
    """Create (and report) an error for a failed request."""
    return _error(ErrorCode.NETWORK, message, error, dispatcher)


def configuration_error(
        message: Optional[str] = None,
        error: Optional[BaseException] = None,
        dispatcher: Optional[LogDispatcher] = None,
) -> PurchasesError:
    """Create (and report) an error for an invalid SDK configuration."""
    return _error(ErrorCode.CONFIGURATION, message, error, dispatcher)


def unexpected_backend_response_error(
        message: Optional[str] = None,
        error: Optional[BaseException] = None,
        dispatcher: Optional[LogDispatcher] = None,
) -> PurchasesError:
    """Create (and report) an error for a backend response that could not be handled."""
    return _error(ErrorCode.UNEXPECTED_BACKEND_RESPONSE, message, error, dispatcher)


def purchase_cancelled_error(
        message: Optional[str] = None,
        error: Optional[BaseException] = None,
        dispatcher: Optional[LogDispatcher] = None,
) -> PurchasesError:
    """Create (and report) an error for a purchase the user cancelled.

    Logged at WARN rather than ERROR.
    """
    return _error(ErrorCode.PURCHASE_CANCELLED, message, error, dispatcher, level=LogLevel.WARN)


def unknown_error(
        message: Optional[str] = None,
        error: Optional[BaseException] = None,
        dispatcher: Optional[LogDispatcher] = None,
) -> PurchasesError:
    """Create (and report) an unclassified error."""
    return _error(ErrorCode.UNKNOWN, message, error, dispatcher)
