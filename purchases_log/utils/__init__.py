"""Utility functions for subscription period text."""

from purchases_log.utils.period_format import (
    abbreviated_unit_string,
    localized_duration,
    parse_subscription_period,
    resolve_locale,
    validate_subscription_period,
)

__all__ = [
    "abbreviated_unit_string",
    "localized_duration",
    "parse_subscription_period",
    "resolve_locale",
    "validate_subscription_period",
]
