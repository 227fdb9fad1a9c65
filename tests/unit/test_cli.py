"""Tests for the purchases-log command-line entry point."""

import json
import logging

import pytest

from purchases_log.__main__ import build_parser, main
from purchases_log.config import CONFIG_PATH_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no logging variables set.

    ``emit`` writes LOG_LEVEL / LOG_FORMAT to the environment; setting them
    here first makes monkeypatch restore them afterwards.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "LOG_FORMAT", CONFIG_PATH_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestDurationCommand:
    """Test the duration subcommand."""

    def test_full_duration(self, capsys):
        assert main(["duration", "P3M"]) == 0
        assert capsys.readouterr().out.strip() == "3 months"

    def test_localized_duration(self, capsys):
        assert main(["duration", "P2W", "--locale", "es"]) == 0
        assert capsys.readouterr().out.strip() == "2 semanas"

    def test_abbreviated_unit(self, capsys):
        assert main(["duration", "P1Y", "--abbreviated"]) == 0
        assert capsys.readouterr().out.strip() == "yr"

    def test_invalid_period(self, capsys):
        assert main(["duration", "monthly"]) == 1
        assert "Must start with 'P'" in capsys.readouterr().err


class TestEmitCommand:
    """Test the emit subcommand."""

    def test_emits_through_console_sink(self, caplog):
        with caplog.at_level(logging.INFO):
            assert main(["--log-format", "json", "emit", "Store is slow", "--level", "warn"]) == 0

        events = [
            json.loads(record.getMessage())["event"]
            for record in caplog.records
            if record.name == "purchases"
        ]
        assert "⚠️ Store is slow" in events

    def test_filtered_message_not_emitted(self, caplog):
        with caplog.at_level(logging.DEBUG):
            code = main([
                "--log-format", "json",
                "emit", "Verbose detail",
                "--level", "debug",
                "--min-level", "error",
            ])

        assert code == 0
        assert "Verbose detail" not in caplog.text

    def test_missing_config_file(self, capsys, tmp_path):
        code = main(["--config", str(tmp_path / "missing.yaml"), "emit", "hello"])

        assert code == 1
        assert "not found" in capsys.readouterr().err


class TestParser:
    """Test argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_level_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["emit", "hello", "--level", "critical"])
