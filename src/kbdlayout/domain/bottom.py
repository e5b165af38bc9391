"""Bottom row (space bar row) construction per device class.

Every element is a separate guarded append. Guards are independent and
the order is fixed, so each function reads top to bottom as the row
reads left to right.
"""

from __future__ import annotations

from typing import Final, Protocol

from kbdlayout.domain.actions import (
    DICTATION,
    DISMISS_KEYBOARD,
    NEW_LINE,
    NEXT_KEYBOARD,
    SPACE,
    Action,
)
from kbdlayout.domain.context import KeyboardContext
from kbdlayout.domain.layout import ActionRow
from kbdlayout.domain.types import DeviceClass

# Dictation is reserved and always disabled; the context flag does not enable it.
DICTATION_SUPPORTED: Final = False


class BottomRowBuilder(Protocol):
    def __call__(
        self,
        context: KeyboardContext,
        left_space_action: Action | None = None,
        right_space_action: Action | None = None,
    ) -> ActionRow: ...


def tablet_bottom_row(
    context: KeyboardContext,
    left_space_action: Action | None = None,
    right_space_action: Action | None = None,
) -> ActionRow:
    """Tablet bottom row; the switcher appears on both sides of the space bar."""
    result: list[Action] = []
    switcher = context.standard_bottom_switcher_action

    if not context.needs_input_mode_switch_key:
        result.append(NEXT_KEYBOARD)
    if switcher is not None:
        result.append(switcher)
    if context.needs_input_mode_switch_key:
        result.append(NEXT_KEYBOARD)
    if DICTATION_SUPPORTED:
        result.append(DICTATION)
    if left_space_action is not None:
        result.append(left_space_action)
    result.append(SPACE)
    if right_space_action is not None:
        result.append(right_space_action)
    if switcher is not None:
        result.append(switcher)
    result.append(DISMISS_KEYBOARD)

    return tuple(result)


def phone_bottom_row(
    context: KeyboardContext,
    left_space_action: Action | None = None,
    right_space_action: Action | None = None,
) -> ActionRow:
    """Phone bottom row; ends with the return key."""
    result: list[Action] = []
    switcher = context.standard_bottom_switcher_action

    if switcher is not None:
        result.append(switcher)
    if context.needs_input_mode_switch_key:
        result.append(NEXT_KEYBOARD)
    if DICTATION_SUPPORTED:
        result.append(DICTATION)
    if left_space_action is not None:
        result.append(left_space_action)
    result.append(SPACE)
    if right_space_action is not None:
        result.append(right_space_action)
    result.append(NEW_LINE)

    return tuple(result)


BOTTOM_ROW_BUILDERS: dict[DeviceClass, BottomRowBuilder] = {
    DeviceClass.TABLET: tablet_bottom_row,
    DeviceClass.PHONE: phone_bottom_row,
}
