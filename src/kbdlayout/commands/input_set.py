"""Command: show the base character rows of an input set."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kbdlayout.commands._base import KbdCommand
from kbdlayout.commands._options import CASE_CHOICE, MODE_CHOICE, keyboard_type_option

if TYPE_CHECKING:
    from kbdlayout.commands._context import AppContext


@click.command(
    "input-set",
    cls=KbdCommand,
    examples="""\
  kbdlayout input-set
  kbdlayout input-set --mode symbolic
  kbdlayout input-set --case uppercased --locale de""",
)
@click.option("--mode", type=MODE_CHOICE, default=None, help="Keyboard mode.")
@click.option("--case", "case", type=CASE_CHOICE, default=None, help="Alphabetic case state.")
@click.option("--locale", default=None, help="Locale of the input sets.")
@click.pass_obj
def input_set(app: AppContext, mode: str | None, case: str | None, locale: str | None) -> None:
    """Show the base character rows for a mode."""
    app.emit(app.layouts.input_set(keyboard_type_option(mode, case), locale))
