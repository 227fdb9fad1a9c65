"""Subscription period parsing and localized duration text.

Parses the ISO 8601 duration strings stores use for subscription periods
("P1M", "P1Y", "P7D") and renders them as human-readable text such as
"1 month" or "3 months", plus short unit labels such as "mo".
"""

import re
from typing import NamedTuple, Union

from purchases_log.models.period import PeriodUnit, SubscriptionPeriod

_UNITS_BY_SYMBOL = {
    "D": PeriodUnit.DAY,
    "W": PeriodUnit.WEEK,
    "M": PeriodUnit.MONTH,
    "Y": PeriodUnit.YEAR,
}

# Full unit names longer than this are replaced by their abbreviation
UNIT_ABBREVIATION_MAXIMUM_LENGTH = 3

DEFAULT_LOCALE = "en"


class UnitNames(NamedTuple):
    singular: str
    plural: str
    abbreviated: str


UNIT_NAMES: dict[str, dict[PeriodUnit, UnitNames]] = {
    "en": {
        PeriodUnit.DAY: UnitNames("day", "days", "day"),
        PeriodUnit.WEEK: UnitNames("week", "weeks", "wk"),
        PeriodUnit.MONTH: UnitNames("month", "months", "mo"),
        PeriodUnit.YEAR: UnitNames("year", "years", "yr"),
    },
    "es": {
        PeriodUnit.DAY: UnitNames("día", "días", "d"),
        PeriodUnit.WEEK: UnitNames("semana", "semanas", "sem"),
        PeriodUnit.MONTH: UnitNames("mes", "meses", "m"),
        PeriodUnit.YEAR: UnitNames("año", "años", "a"),
    },
    "de": {
        PeriodUnit.DAY: UnitNames("Tag", "Tage", "T"),
        PeriodUnit.WEEK: UnitNames("Woche", "Wochen", "Wo."),
        PeriodUnit.MONTH: UnitNames("Monat", "Monate", "Mon."),
        PeriodUnit.YEAR: UnitNames("Jahr", "Jahre", "J"),
    },
    "fr": {
        PeriodUnit.DAY: UnitNames("jour", "jours", "j"),
        PeriodUnit.WEEK: UnitNames("semaine", "semaines", "sem."),
        PeriodUnit.MONTH: UnitNames("mois", "mois", "m."),
        PeriodUnit.YEAR: UnitNames("an", "ans", "an"),
    },
}


def parse_subscription_period(period: str) -> SubscriptionPeriod:
    """Parse an ISO 8601 duration string into a SubscriptionPeriod.

    Supports the single-unit formats stores use for subscriptions:
    - P[n]D - days (e.g., P7D = 7 days)
    - P[n]W - weeks (e.g., P1W = 1 week)
    - P[n]M - months (e.g., P3M = 3 months)
    - P[n]Y - years (e.g., P1Y = 1 year)

    Args:
        period: ISO 8601 duration string (e.g., "P1M", "P1Y", "P7D")

    Returns:
        SubscriptionPeriod with the parsed value and unit

    Raises:
        ValueError: If the period string is invalid or unsupported

    Examples:
        >>> parse_subscription_period("P3M")
        SubscriptionPeriod(value=3, unit=<PeriodUnit.MONTH: 'month'>)
    """
    if not period or not isinstance(period, str):
        raise ValueError("Period must be a non-empty string")

    period = period.strip().upper()

    if not period.startswith("P"):
        raise ValueError(f"Invalid period format: '{period}'. Must start with 'P'")

    duration_str = period[1:]

    if not duration_str:
        raise ValueError(f"Invalid period format: '{period}'. No duration specified")

    # [n] is optional and defaults to 1
    match = re.match(r'^(\d+)?([DWMY])$', duration_str)

    if not match:
        raise ValueError(
            f"Unsupported period format: '{period}'. "
            "Supported formats: P[n]D, P[n]W, P[n]M, P[n]Y"
        )

    number_str, symbol = match.groups()
    number = int(number_str) if number_str else 1

    if number <= 0:
        raise ValueError(f"Period number must be positive, got: {number}")

    return SubscriptionPeriod(value=number, unit=_UNITS_BY_SYMBOL[symbol])


def validate_subscription_period(period: str) -> bool:
    """Validate that a string is a supported subscription period.

    Examples:
        >>> validate_subscription_period("P1M")
        True

        >>> validate_subscription_period("invalid")
        False
    """
    try:
        parse_subscription_period(period)
        return True
    except (ValueError, TypeError):
        return False


def resolve_locale(locale: str) -> str:
    """Find the best supported locale for a locale identifier.

    Tries the full identifier ("es-MX"), then its language ("es"), then
    falls back to English. Underscores are accepted as separators.
    """
    if not locale:
        return DEFAULT_LOCALE

    normalized = locale.strip().replace("_", "-")
    if normalized in UNIT_NAMES:
        return normalized

    language = normalized.split("-", 1)[0].lower()
    if language in UNIT_NAMES:
        return language
    return DEFAULT_LOCALE


def _unit_names(unit: PeriodUnit, locale: str) -> UnitNames:
    return UNIT_NAMES[resolve_locale(locale)][PeriodUnit(unit)]


def localized_duration(
    period: Union[SubscriptionPeriod, str],
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Render a subscription period as full text (e.g., "1 month", "3 months").

    Args:
        period: SubscriptionPeriod or ISO 8601 duration string
        locale: Locale identifier (e.g., "en", "es-MX", "de_DE")

    Returns:
        Localized duration, number followed by the unit name

    Raises:
        ValueError: If ``period`` is a string that cannot be parsed
    """
    if isinstance(period, str):
        period = parse_subscription_period(period)

    names = _unit_names(period.unit, locale)
    unit_name = names.singular if period.value == 1 else names.plural
    return f"{period.value} {unit_name}"


def abbreviated_unit_string(unit: PeriodUnit, locale: str = DEFAULT_LOCALE) -> str:
    """Short label for a unit (e.g., "day", "wk", "mo", "yr").

    The full singular name is used when it is short enough, otherwise the
    locale's abbreviation.
    """
    names = _unit_names(unit, locale)
    if len(names.singular) <= UNIT_ABBREVIATION_MAXIMUM_LENGTH:
        return names.singular
    return names.abbreviated
