"""Rich Console factory and theme for kbdlayout output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from kbdlayout.domain.actions import Action, ActionKind

KBD_THEME = Theme(
    {
        "kbd.ok": "bold green",
        "kbd.error": "bold red",
        "kbd.warning": "bold yellow",
        "kbd.op": "bold cyan",
        "kbd.key": "dim",
        "kbd.char": "bold",
        "kbd.edit": "red",
        "kbd.switch": "magenta",
        "kbd.system": "blue",
        "kbd.space": "green",
    }
)

_KIND_STYLES: dict[ActionKind, str] = {
    ActionKind.CHARACTER: "kbd.char",
    ActionKind.BACKSPACE: "kbd.edit",
    ActionKind.TAB: "kbd.edit",
    ActionKind.NEW_LINE: "kbd.edit",
    ActionKind.SPACE: "kbd.space",
    ActionKind.SHIFT: "kbd.switch",
    ActionKind.SHIFT_LOCK: "kbd.switch",
    ActionKind.KEYBOARD_TYPE: "kbd.switch",
    ActionKind.NEXT_KEYBOARD: "kbd.system",
    ActionKind.DICTATION: "kbd.system",
    ActionKind.DISMISS_KEYBOARD: "kbd.system",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=KBD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_action(action: Action) -> str:
    """Return the Rich style name for an action."""
    return _KIND_STYLES.get(action.kind, "")
