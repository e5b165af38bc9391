"""Tests for the layout command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from pydantic import ValidationError

from kbdlayout.cli import cli


def _rows(cli_runner: CliRunner, *args: str) -> list[list[str]]:
    result = cli_runner.invoke(cli, ["--json", "layout", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)["data"]["rows"]


class TestLayout:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["layout"])
        assert result.exit_code == 0
        assert "compute_layout" in result.output
        assert "q w e r t y u i o p" in result.output
        assert "[space]" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "layout"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "compute_layout"
        assert len(data["data"]["rows"]) == 4

    def test_tablet(self, cli_runner: CliRunner) -> None:
        rows = _rows(cli_runner, "--device", "tablet", "--no-switchers")
        assert rows[0][0] == "tab"
        assert rows[0][-1] == "backspace"
        assert rows[1][0] == "shift_lock"
        assert rows[-1] == ["next_keyboard", "space", "dismiss_keyboard"]

    def test_needs_switch_key(self, cli_runner: CliRunner) -> None:
        rows = _rows(
            cli_runner,
            "--device",
            "tablet",
            "--needs-switch-key",
            "--no-switchers",
            "--left-space",
            "char:,",
            "--right-space",
            "char:.",
        )
        assert rows[0][0] == "char:q"
        assert rows[-1] == ["next_keyboard", "char:,", "space", "char:.", "dismiss_keyboard"]

    def test_numeric_mode(self, cli_runner: CliRunner) -> None:
        rows = _rows(cli_runner, "--mode", "numeric")
        assert rows[0][0] == "char:1"
        assert rows[2][0] == "keyboard_type:symbolic"
        assert rows[-1][0] == "keyboard_type:alphabetic:lowercased"

    def test_case_implies_alphabetic(self, cli_runner: CliRunner) -> None:
        rows = _rows(cli_runner, "--case", "capsLocked")
        assert rows[0][0] == "char:Q"
        assert rows[2][0] == "shift:capsLocked"

    def test_case_with_numeric_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["layout", "--mode", "numeric", "--case", "uppercased"])
        assert result.exit_code == 2
        assert "no case state" in result.output

    def test_invalid_space_action(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["layout", "--left-space", "bogus"])
        assert result.exit_code == 1
        assert "Unknown action" in result.output

    def test_unknown_locale_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["layout", "--locale", "xx"])
        assert result.exit_code == 0
        assert "WARNING" in result.output

    def test_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "kbdlayout.toml").write_text(
            '[keyboard]\ndevice = "tablet"\n[layout]\nswitchers = "none"\n'
        )
        rows = _rows(cli_runner)
        assert rows[-1] == ["next_keyboard", "space", "dismiss_keyboard"]

    def test_invalid_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "kbdlayout.toml").write_text('[layout]\nleft_space_action = "bogus"\n')
        result = cli_runner.invoke(cli, ["layout"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_empty_input_set_key_in_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "kbdlayout.toml").write_text('[input_sets.xx]\nalphabetic = [["a", ""]]\n')
        result = cli_runner.invoke(cli, ["layout", "--locale", "xx"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert not isinstance(result.exception, ValidationError)

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["layout", "--examples"])
        assert result.exit_code == 0
        assert "kbdlayout layout --device tablet" in result.output
