"""Log message types.

Any object exposing ``category`` and ``description`` can be logged. Message
catalogs are usually enums (see ``purchases_log.strings``).
"""

from typing import Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from purchases_log.models.levels import LogLevel


@runtime_checkable
class LogMessage(Protocol):
    """Capability set of a loggable message."""

    @property
    def category(self) -> str: ...

    @property
    def description(self) -> str: ...


class StringMessage(BaseModel):
    """Ad-hoc message built from a plain string."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="Human-readable message text")
    category: str = Field(default="string", description="Message category identifier")

    def __str__(self) -> str:
        return self.description


class LoggedEntry(BaseModel):
    """A level and rendered string pair as received by a message sink."""

    model_config = ConfigDict(frozen=True)

    level: LogLevel
    message: str


def as_log_message(message: Union[LogMessage, str]) -> LogMessage:
    """Wrap plain strings as ``StringMessage``; pass messages through."""
    if isinstance(message, LogMessage):
        return message
    return StringMessage(description=str(message))
