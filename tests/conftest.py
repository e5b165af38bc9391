"""Shared pytest fixtures and test helpers for kbdlayout tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from kbdlayout.domain.actions import Action, character
from kbdlayout.domain.context import KeyboardContext
from kbdlayout.domain.layout import ActionRows
from kbdlayout.domain.switchers import SwitcherTable


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real user/project config files and env vars out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("KBDLAYOUT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def chars(text: str) -> tuple[Action, ...]:
    """Row of character actions, one per character of *text*."""
    return tuple(character(c) for c in text)


BASE_ROWS: ActionRows = (chars("qwertyuiop"), chars("asdfghjkl"), chars("zxcvbnm"))


def bare_context(**kwargs: object) -> KeyboardContext:
    """Context with no switcher actions defined."""
    kwargs.setdefault("switchers", SwitcherTable.empty())
    return KeyboardContext(**kwargs)  # type: ignore[arg-type]
