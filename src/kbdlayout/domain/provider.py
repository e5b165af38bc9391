"""StandardLayoutProvider — derives a system-like layout from a context.

The provider picks the device policy from ``context.device``, decorates
the first three base rows and appends the bottom row. It falls back to
the lowercased alphabetic rows for non-standard keyboard types, so
callers that show emoji or custom keyboards should not rely on it.

The result is a best effort. Native layouts depend on more factors than
the policy tables model, and some locales will not match exactly; fix
such gaps by extending the tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from kbdlayout.domain.actions import Action
from kbdlayout.domain.bottom import BOTTOM_ROW_BUILDERS, BottomRowBuilder
from kbdlayout.domain.context import KeyboardContext
from kbdlayout.domain.layout import ActionRows, KeyboardLayout
from kbdlayout.domain.rows import ROW_POLICIES, RowPolicy, compose_rows
from kbdlayout.domain.types import DeviceClass


@dataclass(frozen=True)
class DevicePolicy:
    """Row decoration table and bottom row builder for one device class."""

    rows: tuple[RowPolicy, ...]
    bottom: BottomRowBuilder


DEVICE_POLICIES: dict[DeviceClass, DevicePolicy] = {
    device: DevicePolicy(rows=ROW_POLICIES[device], bottom=BOTTOM_ROW_BUILDERS[device])
    for device in DeviceClass
}


class SpaceActions(Protocol):
    """Anything carrying the two optional space bar flank actions."""

    left_space_action: Action | None
    right_space_action: Action | None


class StandardLayoutProvider:
    """Layout provider with optional actions flanking the space bar.

    Args:
        left_space_action: Extra action placed directly left of space.
        right_space_action: Extra action placed directly right of space.
    """

    def __init__(
        self,
        left_space_action: Action | None = None,
        right_space_action: Action | None = None,
    ) -> None:
        self.left_space_action = left_space_action
        self.right_space_action = right_space_action

    @classmethod
    def from_config(cls, config: SpaceActions) -> StandardLayoutProvider:
        """Build a provider from any object carrying the two space actions."""
        return cls(
            left_space_action=config.left_space_action,
            right_space_action=config.right_space_action,
        )

    def keyboard_layout(
        self,
        context: KeyboardContext,
        rows: ActionRows | None = None,
    ) -> KeyboardLayout:
        """Compose the layout for *context*.

        *rows* overrides the base rows derived from the context.
        """
        base_rows = context.action_rows if rows is None else rows
        policy = DEVICE_POLICIES[context.device]
        decorated = compose_rows(context, base_rows, policy.rows)
        bottom = policy.bottom(context, self.left_space_action, self.right_space_action)
        return KeyboardLayout(action_rows=(*decorated, bottom))
