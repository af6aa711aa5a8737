"""Tests for the console script entry point."""

from pathlib import Path

import pytest

from draftval.constants import EXIT_ERROR, EXIT_INVALID, EXIT_OK
from draftval.main import main


def test_main_exits_with_runner_code(data_dir: Path):
    """Test that main exits with the command's exit code."""
    schema = str(data_dir / "address-and-phone.schema.json")
    with pytest.raises(SystemExit) as exc_info:
        main(["validate", schema, str(data_dir / "address-and-phone-valid.json")])
    assert exc_info.value.code == EXIT_OK

    with pytest.raises(SystemExit) as exc_info:
        main(
            [
                "validate",
                schema,
                str(data_dir / "address-and-phone-additional-properties.json"),
            ]
        )
    assert exc_info.value.code == EXIT_INVALID


def test_main_broken_settings(isolated_config_dir: Path):
    """Test that an invalid settings file exits with EXIT_ERROR."""
    isolated_config_dir.mkdir(parents=True)
    (isolated_config_dir / "settings.conf").write_text(
        "[DEFAULT]\ndraft3_required = perhaps\n", encoding="utf-8"
    )
    with pytest.raises(SystemExit) as exc_info:
        main(["config", "--show"])
    assert exc_info.value.code == EXIT_ERROR


def test_main_keyboard_interrupt(monkeypatch: pytest.MonkeyPatch):
    """Test that Ctrl-C exits with EXIT_ERROR."""

    def interrupted(self, argv=None):
        raise KeyboardInterrupt

    monkeypatch.setattr("draftval.cli.runner.CLIRunner.run", interrupted)
    with pytest.raises(SystemExit) as exc_info:
        main(["config", "--show"])
    assert exc_info.value.code == EXIT_ERROR
