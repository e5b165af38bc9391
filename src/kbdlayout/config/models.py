"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, kbdlayout.toml only contains
overrides. An empty file yields an English phone keyboard.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from kbdlayout.domain.actions import Action, parse_action
from kbdlayout.domain.input_sets import DEFAULT_LOCALE, InputSetProvider
from kbdlayout.domain.types import DeviceClass, Orientation

# --- kbdlayout.toml sections ---


class KeyboardConfig(BaseModel):
    """[keyboard] section — default context values."""

    model_config = {"frozen": True}

    device: DeviceClass = DeviceClass.PHONE
    orientation: Orientation = Orientation.PORTRAIT
    locale: str = DEFAULT_LOCALE
    needs_input_mode_switch_key: bool = False
    has_dictation_key: bool = False
    has_full_access: bool = False


class LayoutConfig(BaseModel):
    """[layout] section — provider customization.

    Space actions use the action text form, e.g. ``left_space_action = "char:,"``.
    """

    model_config = {"frozen": True}

    left_space_action: Action | None = None
    right_space_action: Action | None = None
    switchers: Literal["standard", "none"] = "standard"

    @field_validator("left_space_action", "right_space_action", mode="before")
    @classmethod
    def _parse_action_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_action(value)
        return value


class KbdConfig(BaseModel):
    """Root configuration composing all sections.

    ``input_sets`` maps a locale to its input sets, e.g.::

        [input_sets.de]
        alphabetic = ["qwertzuiopü", "asdfghjklöä", "yxcvbnm"]
    """

    model_config = {"frozen": True}

    keyboard: KeyboardConfig = Field(default_factory=KeyboardConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    input_sets: dict[str, InputSetProvider] = Field(default_factory=dict)
