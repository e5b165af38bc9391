"""Command: compose the keyboard layout for a context."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kbdlayout.commands._base import KbdCommand
from kbdlayout.commands._options import CASE_CHOICE, MODE_CHOICE, keyboard_type_option
from kbdlayout.domain.types import DeviceClass, Orientation

if TYPE_CHECKING:
    from kbdlayout.commands._context import AppContext


@click.command(
    cls=KbdCommand,
    examples="""\
  kbdlayout layout
  kbdlayout layout --device tablet --mode numeric
  kbdlayout layout --case capsLocked --needs-switch-key
  kbdlayout layout --left-space "char:," --right-space "char:."
  kbdlayout --json layout --device tablet --no-switchers""",
)
@click.option(
    "--device",
    type=click.Choice([d.value for d in DeviceClass]),
    default=None,
    help="Device class (default from config).",
)
@click.option("--mode", type=MODE_CHOICE, default=None, help="Keyboard mode.")
@click.option("--case", "case", type=CASE_CHOICE, default=None, help="Alphabetic case state.")
@click.option("--locale", default=None, help="Locale of the input sets.")
@click.option(
    "--orientation",
    type=click.Choice([o.value for o in Orientation]),
    default=None,
    help="Interface orientation.",
)
@click.option(
    "--needs-switch-key/--no-needs-switch-key",
    "needs_switch_key",
    default=None,
    help="Whether the host requires an input mode switch (globe) key.",
)
@click.option("--left-space", default=None, help="Action left of the space bar, e.g. 'char:,'.")
@click.option("--right-space", default=None, help="Action right of the space bar.")
@click.option("--no-switchers", is_flag=True, help="Omit mode switcher keys.")
@click.pass_obj
def layout(
    app: AppContext,
    device: str | None,
    mode: str | None,
    case: str | None,
    locale: str | None,
    orientation: str | None,
    needs_switch_key: bool | None,
    left_space: str | None,
    right_space: str | None,
    no_switchers: bool,
) -> None:
    """Compose the keyboard layout for a device and mode."""
    app.emit(
        app.layouts.compute(
            left_space_action=left_space,
            right_space_action=right_space,
            device=DeviceClass(device) if device else None,
            keyboard_type=keyboard_type_option(mode, case),
            orientation=Orientation(orientation) if orientation else None,
            locale=locale,
            needs_input_mode_switch_key=needs_switch_key,
            switchers=False if no_switchers else None,
        )
    )
