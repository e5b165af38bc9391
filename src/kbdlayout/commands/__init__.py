"""Subcommand modules for kbdlayout.

Provides register_commands() which uses deferred imports to keep
``kbdlayout --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from kbdlayout.commands.input_set import input_set
    from kbdlayout.commands.layout import layout

    cli.add_command(layout)
    cli.add_command(input_set)
