"""Keyboard classification enums and the keyboard type (mode) model.

A keyboard type is the active character set. Only the alphabetic type
carries a case state; every other kind ignores it.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, model_validator


class DeviceClass(StrEnum):
    """Form factor that selects the layout policy."""

    PHONE = "phone"
    TABLET = "tablet"


class Orientation(StrEnum):
    """Interface orientation of the host device."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class KeyboardCase(StrEnum):
    """Case state of an alphabetic keyboard."""

    LOWERCASED = "lowercased"
    UPPERCASED = "uppercased"
    CAPS_LOCKED = "capsLocked"

    @property
    def is_uppercased(self) -> bool:
        """Whether characters should be typed in upper case."""
        return self in (KeyboardCase.UPPERCASED, KeyboardCase.CAPS_LOCKED)


class ModeKind(StrEnum):
    """Character set families. ``other`` covers non-standard keyboards (emoji etc.)."""

    ALPHABETIC = "alphabetic"
    NUMERIC = "numeric"
    SYMBOLIC = "symbolic"
    OTHER = "other"


class KeyboardType(BaseModel):
    """The active keyboard mode, e.g. ``alphabetic(lowercased)`` or ``numeric``."""

    model_config = {"frozen": True}

    kind: ModeKind
    case: KeyboardCase | None = None

    @model_validator(mode="after")
    def _case_only_for_alphabetic(self) -> KeyboardType:
        if self.kind is not ModeKind.ALPHABETIC and self.case is not None:
            raise ValueError(f"{self.kind} keyboards have no case state")
        return self

    @classmethod
    def alphabetic(cls, case: KeyboardCase = KeyboardCase.LOWERCASED) -> KeyboardType:
        return cls(kind=ModeKind.ALPHABETIC, case=case)

    @classmethod
    def numeric(cls) -> KeyboardType:
        return cls(kind=ModeKind.NUMERIC)

    @classmethod
    def symbolic(cls) -> KeyboardType:
        return cls(kind=ModeKind.SYMBOLIC)

    @classmethod
    def other(cls) -> KeyboardType:
        return cls(kind=ModeKind.OTHER)

    def __str__(self) -> str:
        if self.case is not None:
            return f"{self.kind}:{self.case}"
        return str(self.kind)

    @classmethod
    def parse(cls, text: str) -> KeyboardType:
        """Parse ``"numeric"`` or ``"alphabetic:capsLocked"`` style text.

        A bare ``"alphabetic"`` means lowercased.
        """
        kind, _, case = text.strip().partition(":")
        mode = ModeKind(kind)
        if mode is ModeKind.ALPHABETIC:
            return cls.alphabetic(KeyboardCase(case) if case else KeyboardCase.LOWERCASED)
        if case:
            raise ValueError(f"{mode} keyboards have no case state")
        return cls(kind=mode)
