"""Mode -> auxiliary switcher action resolution.

A switcher table maps ``(device, mode kind)`` to the action that flanks
the third row (side switcher) and the action placed in the bottom bar
(bottom switcher). Missing entries mean "no switcher".

A ``shift`` entry without a case is a template: it resolves to a shift
carrying the active alphabetic case.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, field_validator

from kbdlayout.domain.actions import Action, ActionKind, keyboard_type, shift
from kbdlayout.domain.types import DeviceClass, KeyboardType, ModeKind

SwitcherEntry = tuple[DeviceClass, ModeKind, Action]


class SwitcherTable(BaseModel):
    """Side and bottom switcher actions per device and mode.

    Entries are stored as ``(device, mode, action)`` tuples so the table
    (and any context holding it) stays hashable. Either column also
    accepts a nested ``{device: {mode: action}}`` mapping.
    """

    model_config = {"frozen": True}

    side: tuple[SwitcherEntry, ...] = ()
    bottom: tuple[SwitcherEntry, ...] = ()

    @field_validator("side", "bottom", mode="before")
    @classmethod
    def _flatten_map(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(
                (device, mode, action)
                for device, modes in value.items()
                for mode, action in modes.items()
            )
        return value

    @classmethod
    def empty(cls) -> SwitcherTable:
        return cls()

    def side_action(self, mode: KeyboardType, device: DeviceClass) -> Action | None:
        return _resolve(self.side, mode, device)

    def bottom_action(self, mode: KeyboardType, device: DeviceClass) -> Action | None:
        return _resolve(self.bottom, mode, device)


def _resolve(
    entries: tuple[SwitcherEntry, ...], mode: KeyboardType, device: DeviceClass
) -> Action | None:
    action = next((a for d, m, a in entries if d == device and m == mode.kind), None)
    if action is None:
        return None
    if action.kind is ActionKind.SHIFT and action.case is None and mode.case is not None:
        return shift(mode.case)
    return action


def standard_side_switcher_action(
    mode: KeyboardType,
    device: DeviceClass,
    table: SwitcherTable | None = None,
) -> Action | None:
    """Side switcher for *mode* on *device* (standard table by default)."""
    return (STANDARD_SWITCHERS if table is None else table).side_action(mode, device)


def standard_bottom_switcher_action(
    mode: KeyboardType,
    device: DeviceClass,
    table: SwitcherTable | None = None,
) -> Action | None:
    """Bottom switcher for *mode* on *device* (standard table by default)."""
    return (STANDARD_SWITCHERS if table is None else table).bottom_action(mode, device)


# --- Built-in table (phones and tablets share it) ---

_STANDARD_SIDE: dict[ModeKind, Action] = {
    ModeKind.ALPHABETIC: shift(),
    ModeKind.NUMERIC: keyboard_type(KeyboardType.symbolic()),
    ModeKind.SYMBOLIC: keyboard_type(KeyboardType.numeric()),
}

_STANDARD_BOTTOM: dict[ModeKind, Action] = {
    ModeKind.ALPHABETIC: keyboard_type(KeyboardType.numeric()),
    ModeKind.NUMERIC: keyboard_type(KeyboardType.alphabetic()),
    ModeKind.SYMBOLIC: keyboard_type(KeyboardType.alphabetic()),
}

STANDARD_SWITCHERS = SwitcherTable(
    side={device: dict(_STANDARD_SIDE) for device in DeviceClass},
    bottom={device: dict(_STANDARD_BOTTOM) for device in DeviceClass},
)
