"""Tests for the root kbdlayout CLI."""

import pytest
from click.testing import CliRunner

from kbdlayout import __version__
from kbdlayout.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "kbdlayout" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/nonexistent/kbdlayout.toml", "--version"])
    assert result.exit_code == 0


EXPECTED_COMMANDS = ["layout", "input-set"]


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0
