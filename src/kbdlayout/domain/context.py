"""KeyboardContext — read-only snapshot consumed by layout composition.

The context carries everything the layout rules look at: device class,
keyboard type, capability flags, and the locale's input sets. Base rows
and switcher actions are derived from it, never stored separately.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from kbdlayout.domain.actions import Action
from kbdlayout.domain.input_sets import DEFAULT_LOCALE, ENGLISH, InputSet, InputSetProvider
from kbdlayout.domain.layout import ActionRows, action_rows_from_characters
from kbdlayout.domain.switchers import STANDARD_SWITCHERS, SwitcherTable
from kbdlayout.domain.types import DeviceClass, KeyboardType, ModeKind, Orientation


class KeyboardContext(BaseModel):
    """Snapshot of the keyboard state for a single layout request."""

    model_config = {"frozen": True}

    device: DeviceClass = DeviceClass.PHONE
    keyboard_type: KeyboardType = Field(default_factory=KeyboardType.alphabetic)
    orientation: Orientation = Orientation.PORTRAIT
    locale: str = DEFAULT_LOCALE
    needs_input_mode_switch_key: bool = False
    has_dictation_key: bool = False
    has_full_access: bool = False
    input_set_provider: InputSetProvider = ENGLISH
    switchers: SwitcherTable = STANDARD_SWITCHERS

    @property
    def input_set(self) -> InputSet:
        """Input set for the current keyboard type, case applied.

        Non-standard keyboard types fall back to the lowercased alphabetic set.
        """
        provider = self.input_set_provider
        mode = self.keyboard_type
        if mode.kind is ModeKind.ALPHABETIC:
            if mode.case is not None and mode.case.is_uppercased:
                return provider.alphabetic.uppercased()
            return provider.alphabetic
        if mode.kind is ModeKind.NUMERIC:
            return provider.numeric
        if mode.kind is ModeKind.SYMBOLIC:
            return provider.symbolic
        return provider.alphabetic

    @property
    def action_rows(self) -> ActionRows:
        """Base character rows for the current keyboard type."""
        return action_rows_from_characters(self.input_set.rows)

    @property
    def standard_side_switcher_action(self) -> Action | None:
        return self.switchers.side_action(self.keyboard_type, self.device)

    @property
    def standard_bottom_switcher_action(self) -> Action | None:
        return self.switchers.bottom_action(self.keyboard_type, self.device)
