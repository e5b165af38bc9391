"""Option helpers shared by the layout commands."""

from __future__ import annotations

import click

from kbdlayout.domain.types import KeyboardCase, KeyboardType, ModeKind

MODE_CHOICE = click.Choice([m.value for m in ModeKind])
CASE_CHOICE = click.Choice([c.value for c in KeyboardCase])


def keyboard_type_option(mode: str | None, case: str | None) -> KeyboardType | None:
    """Combine ``--mode`` and ``--case`` into a keyboard type.

    ``--case`` alone implies an alphabetic keyboard.
    """
    if mode is None and case is None:
        return None
    kind = ModeKind(mode) if mode else ModeKind.ALPHABETIC
    if kind is ModeKind.ALPHABETIC:
        return KeyboardType.alphabetic(KeyboardCase(case) if case else KeyboardCase.LOWERCASED)
    if case is not None:
        raise click.BadParameter(f"{kind} keyboards have no case state", param_hint="'--case'")
    return KeyboardType(kind=kind)
