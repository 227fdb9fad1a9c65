"""Subscription period model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PeriodUnit(str, Enum):
    """Calendar unit of a subscription period."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class SubscriptionPeriod(BaseModel):
    """A subscription period such as "1 month" (ISO 8601 ``P1M``)."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"value": 1, "unit": "month"}},
    )

    value: int = Field(..., gt=0, description="Number of units")
    unit: PeriodUnit = Field(..., description="Calendar unit")

    @property
    def iso_8601(self) -> str:
        """ISO 8601 representation (e.g. "P3M")."""
        return f"P{self.value}{self.unit.value[0].upper()}"
