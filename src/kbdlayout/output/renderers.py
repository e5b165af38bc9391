"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from kbdlayout.domain.actions import parse_action
from kbdlayout.output.console import create_console, get_output, style_for_action

if TYPE_CHECKING:
    from rich.console import Console

    from kbdlayout.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def key_label(text: str) -> Text:
    """Label for one key given its action text.

    Characters render bare; every other action renders as ``[name]``.
    """
    action = parse_action(text)
    label = action.char if action.char is not None else f"[{text}]"
    return Text(label, style=style_for_action(action))


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="kbd.ok")
    op = Text(f"  {result.op}", style="kbd.op")
    console.print(label, op, end="")
    console.print()


def _render_row(keys: list[str]) -> Text:
    return Text(" ").join(key_label(key) for key in keys)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_layout(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    console.print(
        Text(f"  {data['device']} · {data['keyboard_type']} · {data['locale']}", style="kbd.key")
    )
    for row in data["rows"]:
        console.print(Text("  ") + _render_row(row))
    if verbose:
        console.print(
            Text(
                f"  base rows: {data['base_row_count']}, layout rows: {len(data['rows'])}",
                style="kbd.key",
            )
        )


def _render_input_set(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    console.print(Text(f"  {data['keyboard_type']} · {data['locale']}", style="kbd.key"))
    for row in data["rows"]:
        console.print(Text("  " + " ".join(row), style="kbd.char"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        console.print(Text(f"  {key}: ", style="kbd.key") + Text(str(value)))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(Text("ERROR", style="kbd.error"), Text(f"  {result.op} — {msg}"))
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            console.print(Text(f"  {key}: {value}", style="kbd.key"))


_OP_RENDERERS: dict[str, Callable[..., Any]] = {
    "compute_layout": _render_layout,
    "input_set": _render_input_set,
}
