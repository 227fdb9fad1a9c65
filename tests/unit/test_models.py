"""Tests for level, message, period and settings models."""

import pytest
from pydantic import ValidationError

from purchases_log.models import (
    LoggedEntry,
    LoggingSettings,
    LogIntent,
    LogLevel,
    LogMessage,
    PeriodUnit,
    StringMessage,
    SubscriptionPeriod,
    as_log_message,
)
from purchases_log.strings import ConfigureStrings, ErrorStrings


class TestLogLevelParse:
    """Test LogLevel.parse."""

    @pytest.mark.parametrize("value,expected", [
        ("verbose", LogLevel.VERBOSE),
        ("DEBUG", LogLevel.DEBUG),
        (" Info ", LogLevel.INFO),
        ("warn", LogLevel.WARN),
        ("warning", LogLevel.WARN),
        ("error", LogLevel.ERROR),
        (3, LogLevel.WARN),
        (LogLevel.ERROR, LogLevel.ERROR),
    ])
    def test_parse_valid(self, value, expected):
        assert LogLevel.parse(value) is expected

    @pytest.mark.parametrize("value", ["critical", "", 9, None, True])
    def test_parse_invalid(self, value):
        with pytest.raises(ValueError):
            LogLevel.parse(value)

    def test_str_is_lowercase_name(self):
        assert str(LogLevel.WARN) == "warn"


class TestLogIntent:
    """Test intent mapping."""

    def test_levels_map_to_three_intents(self):
        """Five levels, three intents."""
        assert {LogIntent.for_level(level) for level in LogLevel} == set(LogIntent)

    def test_prefixes_are_distinct(self):
        assert len({intent.prefix for intent in LogIntent}) == 3


class TestMessages:
    """Test LogMessage implementations."""

    def test_catalog_members_are_log_messages(self):
        """Catalog enums satisfy the LogMessage protocol."""
        assert isinstance(ErrorStrings.NETWORK_ERROR, LogMessage)
        assert isinstance(ConfigureStrings.LOG_LEVEL_SET, LogMessage)
        assert ErrorStrings.NETWORK_ERROR.category == "error"

    def test_string_message_defaults(self):
        message = StringMessage(description="hello")
        assert message.category == "string"
        assert str(message) == "hello"

    def test_as_log_message_wraps_strings(self):
        message = as_log_message("plain text")
        assert isinstance(message, StringMessage)
        assert message.description == "plain text"

    def test_as_log_message_passes_messages_through(self):
        assert as_log_message(ErrorStrings.UNKNOWN_ERROR) is ErrorStrings.UNKNOWN_ERROR

    def test_formatted_catalog_message_keeps_category(self):
        message = ConfigureStrings.LOG_LEVEL_SET.format(level=LogLevel.DEBUG)
        assert message.category == "configure"
        assert message.description == "Log level set to debug"

    def test_logged_entry_equality(self):
        assert LoggedEntry(level=LogLevel.INFO, message="ℹ️ a") == LoggedEntry(
            level=LogLevel.INFO, message="ℹ️ a"
        )
        assert LoggedEntry(level=LogLevel.INFO, message="ℹ️ a") != LoggedEntry(
            level=LogLevel.WARN, message="ℹ️ a"
        )


class TestSubscriptionPeriod:
    """Test SubscriptionPeriod model."""

    def test_iso_8601(self):
        assert SubscriptionPeriod(value=3, unit=PeriodUnit.MONTH).iso_8601 == "P3M"
        assert SubscriptionPeriod(value=1, unit="week").iso_8601 == "P1W"

    def test_value_must_be_positive(self):
        with pytest.raises(ValidationError):
            SubscriptionPeriod(value=0, unit=PeriodUnit.DAY)


class TestLoggingSettings:
    """Test LoggingSettings validation."""

    def test_defaults(self):
        settings = LoggingSettings()
        assert settings.log_level == LogLevel.INFO
        assert settings.log_format == "console"
        assert settings.console_sink is True

    def test_level_by_name(self):
        assert LoggingSettings(log_level="Warning").log_level == LogLevel.WARN

    def test_format_is_normalized(self):
        assert LoggingSettings(log_format="JSON").log_format == "json"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingSettings(log_level="loud")

    def test_invalid_format(self):
        with pytest.raises(ValidationError):
            LoggingSettings(log_format="xml")
