"""Tests for logger configuration module."""

from pathlib import Path

from pytest import MonkeyPatch

from draftval.logger.config import load_log_settings


def test_load_log_settings_with_env_var(monkeypatch: MonkeyPatch) -> None:
    """Test load_log_settings returns the log file when the env var is set."""
    test_log_dir = "/tmp/pytest-draftval-logs"
    monkeypatch.setenv("DRAFTVAL_LOG_DIR", test_log_dir)

    console_level, file_level, log_path = load_log_settings()

    assert console_level == "WARNING"
    assert file_level == "INFO"
    assert log_path == Path(test_log_dir) / "draftval.log"


def test_load_log_settings_without_env_var(monkeypatch: MonkeyPatch) -> None:
    """Test that file logging is off by default."""
    monkeypatch.delenv("DRAFTVAL_LOG_DIR", raising=False)

    _, _, log_path = load_log_settings()

    assert log_path is None


def test_load_log_settings_with_tilde_in_env_var(
    monkeypatch: MonkeyPatch,
) -> None:
    """Test load_log_settings expands tilde in DRAFTVAL_LOG_DIR."""
    monkeypatch.setenv("DRAFTVAL_LOG_DIR", "~/custom-logs")

    _, _, log_path = load_log_settings()

    assert log_path == Path.home() / "custom-logs" / "draftval.log"
    assert "~" not in str(log_path)


def test_log_level_env_overrides_console(monkeypatch: MonkeyPatch) -> None:
    """Test that LOG_LEVEL sets the console level."""
    monkeypatch.setenv("LOG_LEVEL", "debug")

    console_level, file_level, _ = load_log_settings()

    assert console_level == "DEBUG"
    assert file_level == "INFO"


def test_invalid_log_level_env_ignored(monkeypatch: MonkeyPatch) -> None:
    """Test that an unknown LOG_LEVEL keeps the default."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    console_level, _, _ = load_log_settings()

    assert console_level == "WARNING"
