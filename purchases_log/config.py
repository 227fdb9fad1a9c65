"""Configuration management - loads logging.yaml and environment variables."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from purchases_log.logging_config import configure_logging, get_logger
from purchases_log.models.settings import LoggingSettings
from purchases_log.services.log_dispatcher import LogDispatcher, get_log_dispatcher
from purchases_log.services.sinks import ConsoleSink
from purchases_log.strings.configure_strings import ConfigureStrings

logger = get_logger(__name__)

CONFIG_PATH_ENV = "PURCHASES_LOG_CONFIG"
DEFAULT_CONFIG_PATH = "config/logging.yaml"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""

    pass


class Config:
    """Logging configuration loader.

    Settings come from, in increasing priority:
    - LoggingSettings defaults
    - the YAML file
    - LOG_LEVEL / LOG_FORMAT environment variables
    """

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to logging.yaml. If not provided, uses the
                        PURCHASES_LOG_CONFIG env var or ./config/logging.yaml
        """
        self._config_path, self._required = self._resolve_config_path(config_path)
        self._settings: Optional[LoggingSettings] = None
        self._load_config()

    def _resolve_config_path(self, config_path: Optional[str]) -> tuple[Path, bool]:
        """Resolve configuration file path; explicit paths must exist."""
        if config_path:
            return Path(config_path), True

        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            return Path(env_path), True

        return Path(DEFAULT_CONFIG_PATH), False

    def _load_config(self) -> None:
        """Load, merge and validate configuration."""
        raw_config = self._read_file()
        raw_config.update(self._env_overrides())

        try:
            self._settings = LoggingSettings(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}")

    def _read_file(self) -> dict[str, Any]:
        if not self._config_path.exists():
            if self._required:
                raise ConfigurationError(
                    f"Configuration file not found: {self._config_path}\n"
                    f"Please create it or unset {CONFIG_PATH_ENV}"
                )
            logger.debug("logging_config_defaults", path=str(self._config_path))
            return {}

        try:
            with open(self._config_path, encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML configuration: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file {self._config_path}: {e}")

        if raw_config is None:
            return {}
        if not isinstance(raw_config, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {self._config_path}"
            )

        logger.debug("logging_config_loaded", path=str(self._config_path))
        return raw_config

    @staticmethod
    def _env_overrides() -> dict[str, str]:
        overrides = {}
        if os.getenv("LOG_LEVEL"):
            overrides["log_level"] = os.environ["LOG_LEVEL"]
        if os.getenv("LOG_FORMAT"):
            overrides["log_format"] = os.environ["LOG_FORMAT"]
        return overrides

    @property
    def settings(self) -> LoggingSettings:
        """Get validated logging settings."""
        if self._settings is None:
            raise ConfigurationError("Configuration not loaded")
        return self._settings

    @property
    def config_path(self) -> Path:
        """Get path to configuration file."""
        return self._config_path

    @property
    def file_loaded(self) -> bool:
        """Whether settings were read from a file (rather than defaults)."""
        return self._config_path.exists()

    def apply(self, dispatcher: Optional[LogDispatcher] = None) -> LogDispatcher:
        """Apply the settings to a dispatcher (the shared one by default).

        Configures structlog, sets the dispatcher level and, when enabled,
        installs a ConsoleSink as the message sink.

        Returns:
            The configured dispatcher
        """
        settings = self.settings
        dispatcher = dispatcher or get_log_dispatcher()

        configure_logging(
            log_level=settings.log_level.name,
            json_format=settings.log_format == "json",
            include_timestamp=settings.include_timestamp,
        )
        dispatcher.set_level(settings.log_level)

        if settings.console_sink:
            dispatcher.set_message_sink(ConsoleSink())
            dispatcher.debug(ConfigureStrings.CONSOLE_SINK_INSTALLED.format(log_format=settings.log_format))
        else:
            dispatcher.set_message_sink(None)

        if self.file_loaded:
            dispatcher.debug(ConfigureStrings.CONFIG_LOADED.format(path=self._config_path))
        else:
            dispatcher.debug(ConfigureStrings.CONFIG_DEFAULTS.format(path=self._config_path))
        dispatcher.info(ConfigureStrings.LOG_LEVEL_SET.format(level=settings.log_level))

        return dispatcher

    def reload(self) -> None:
        """Reload configuration from disk and environment."""
        self._load_config()


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(config_path: Optional[str] = None) -> Config:
    """Get global configuration instance (singleton).

    Args:
        config_path: Optional path to configuration file (only used on first call)

    Returns:
        Config instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config(config_path)
    return _config_instance


def reload_config() -> None:
    """Reload global configuration from disk."""
    global _config_instance
    if _config_instance:
        _config_instance.reload()
    else:
        _config_instance = Config()
