"""Messages logged when SDK errors are created."""

from enum import Enum


class ErrorStrings(Enum):
    """Error log messages."""

    CUSTOMER_INFO_ERROR = "There was a problem fetching customer info."
    NETWORK_ERROR = "Error performing request."
    CONFIGURATION_ERROR = "There is an issue with your configuration."
    UNEXPECTED_BACKEND_RESPONSE = "Received unexpected response from the backend."
    PURCHASE_CANCELLED = "Purchase was cancelled."
    UNKNOWN_ERROR = "An unknown error occurred."

    @property
    def category(self) -> str:
        return "error"

    @property
    def description(self) -> str:
        return self.value
