"""Tests for configuration loading and application."""

import pytest

from purchases_log.config import (
    CONFIG_PATH_ENV,
    Config,
    ConfigurationError,
    get_config,
    reload_config,
)
from purchases_log.models.levels import LogLevel
from purchases_log.services.log_dispatcher import LogDispatcher
from purchases_log.services.sinks import ConsoleSink


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from LOG_LEVEL / LOG_FORMAT / config path in the environment."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", CONFIG_PATH_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def config_file(tmp_path):
    """Write a logging.yaml and return its path."""
    path = tmp_path / "logging.yaml"
    path.write_text(
        "log_level: debug\n"
        "log_format: json\n"
        "console_sink: false\n"
        "include_timestamp: false\n",
        encoding="utf-8",
    )
    return path


class TestConfigurationLoading:
    """Test configuration loading."""

    def test_loads_file(self, config_file):
        config = Config(str(config_file))

        assert config.config_path == config_file
        assert config.file_loaded is True
        assert config.settings.log_level == LogLevel.DEBUG
        assert config.settings.log_format == "json"
        assert config.settings.console_sink is False

    def test_path_from_environment(self, monkeypatch, config_file):
        monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))

        assert Config().config_path == config_file

    def test_missing_default_file_uses_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)

        config = Config()

        assert config.file_loaded is False
        assert config.settings.log_level == LogLevel.INFO

    def test_missing_explicit_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            Config(str(tmp_path / "missing.yaml"))

    def test_missing_environment_file_raises(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "missing.yaml"))

        with pytest.raises(ConfigurationError, match="not found"):
            Config()

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "logging.yaml"
        path.write_text("", encoding="utf-8")

        assert Config(str(path)).settings.log_format == "console"

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "logging.yaml"
        path.write_text("log_level: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
            Config(str(path))

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "logging.yaml"
        path.write_text("- info\n- debug\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            Config(str(path))

    def test_invalid_level_raises(self, tmp_path):
        path = tmp_path / "logging.yaml"
        path.write_text("log_level: loud\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="validation failed"):
            Config(str(path))


class TestEnvironmentOverrides:
    """Environment variables take priority over the file."""

    def test_log_level_override(self, monkeypatch, config_file):
        monkeypatch.setenv("LOG_LEVEL", "warning")

        assert Config(str(config_file)).settings.log_level == LogLevel.WARN

    def test_log_format_override(self, monkeypatch, config_file):
        monkeypatch.setenv("LOG_FORMAT", "console")

        assert Config(str(config_file)).settings.log_format == "console"

    def test_reload_picks_up_changes(self, monkeypatch, config_file):
        config = Config(str(config_file))
        monkeypatch.setenv("LOG_LEVEL", "error")

        config.reload()

        assert config.settings.log_level == LogLevel.ERROR


class TestApply:
    """Test applying settings to a dispatcher."""

    def test_sets_level_without_console_sink(self, config_file):
        dispatcher = LogDispatcher()

        Config(str(config_file)).apply(dispatcher)

        assert dispatcher.level == LogLevel.DEBUG
        assert dispatcher.message_sink is None

    def test_installs_console_sink(self, tmp_path):
        path = tmp_path / "logging.yaml"
        path.write_text("log_level: warn\nconsole_sink: true\n", encoding="utf-8")
        dispatcher = LogDispatcher()

        Config(str(path)).apply(dispatcher)

        assert dispatcher.level == LogLevel.WARN
        assert isinstance(dispatcher.message_sink, ConsoleSink)

    def test_keeps_error_sink(self, config_file):
        errors = []
        dispatcher = LogDispatcher(error_sink=errors.append)

        Config(str(config_file)).apply(dispatcher)

        assert dispatcher.error_sink is not None

    def test_disabled_console_sink_clears_message_sink(self, config_file):
        """console_sink: false removes a previously registered message sink."""
        dispatcher = LogDispatcher(message_sink=ConsoleSink())

        Config(str(config_file)).apply(dispatcher)

        assert dispatcher.message_sink is None


class TestGlobalConfig:
    """Test the shared configuration instance."""

    def test_get_config_is_singleton(self, monkeypatch, config_file):
        import purchases_log.config as config_module

        monkeypatch.setattr(config_module, "_config_instance", None)

        first = get_config(str(config_file))
        second = get_config()

        assert first is second
        assert second.config_path == config_file

    def test_reload_config_creates_instance(self, monkeypatch, tmp_path):
        import purchases_log.config as config_module

        monkeypatch.setattr(config_module, "_config_instance", None)
        monkeypatch.chdir(tmp_path)

        reload_config()

        assert config_module._config_instance is not None
