"""Messages logged while configuring the SDK's logging."""

from enum import Enum

from purchases_log.models.messages import StringMessage


class ConfigureStrings(Enum):
    """Configuration log messages. Values are format templates."""

    LOG_LEVEL_SET = "Log level set to {level}"
    CONSOLE_SINK_INSTALLED = "Console log output enabled ({log_format})"
    CONFIG_LOADED = "Logging configuration loaded from {path}"
    CONFIG_DEFAULTS = "No logging configuration found at {path}, using defaults"

    @property
    def category(self) -> str:
        return "configure"

    @property
    def description(self) -> str:
        return self.value

    def format(self, **kwargs: object) -> StringMessage:
        """Fill in the template, keeping this message's category."""
        return StringMessage(category=self.category, description=self.value.format(**kwargs))
