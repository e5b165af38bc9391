"""Keyboard actions — the semantic effect of a single key.

An Action is a frozen tagged value: ``kind`` selects the variant and the
optional payload fields carry its data. Actions compare and hash by value.

Every action has a canonical text form used by config files and the CLI::

    backspace  tab  new_line  space  shift_lock  next_keyboard
    dictation  dismiss_keyboard  none
    char:a                      (character input)
    shift  shift:capsLocked     (shift, optionally with a case state)
    keyboard_type:numeric       (switch to another keyboard type)
    keyboard_type:alphabetic:uppercased
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, model_validator

from kbdlayout.domain.types import KeyboardCase, KeyboardType


class ActionParseError(ValueError):
    """Raised when action text does not match any known form."""


class ActionKind(StrEnum):
    """Action variants."""

    CHARACTER = "character"
    BACKSPACE = "backspace"
    TAB = "tab"
    NEW_LINE = "newLine"
    SPACE = "space"
    SHIFT = "shift"
    SHIFT_LOCK = "shiftLock"
    KEYBOARD_TYPE = "keyboardType"
    NEXT_KEYBOARD = "nextKeyboard"
    DICTATION = "dictation"
    DISMISS_KEYBOARD = "dismissKeyboard"
    NONE = "none"


class Action(BaseModel):
    """A single key action."""

    model_config = {"frozen": True}

    kind: ActionKind
    char: str | None = None
    keyboard_type: KeyboardType | None = None
    case: KeyboardCase | None = None

    @model_validator(mode="after")
    def _check_payload(self) -> Action:
        if (self.char is not None) != (self.kind is ActionKind.CHARACTER):
            raise ValueError("char is required for, and only for, character actions")
        if not (self.char is None or self.char):
            raise ValueError("character actions need a non-empty char")
        if (self.keyboard_type is not None) != (self.kind is ActionKind.KEYBOARD_TYPE):
            raise ValueError("keyboard_type is required for, and only for, keyboardType actions")
        if self.case is not None and self.kind is not ActionKind.SHIFT:
            raise ValueError("case is only valid for shift actions")
        return self

    @property
    def is_character(self) -> bool:
        return self.kind is ActionKind.CHARACTER

    def __str__(self) -> str:
        return format_action(self)


# --- Constructors ---


def character(char: str) -> Action:
    """Character input action for *char*."""
    return Action(kind=ActionKind.CHARACTER, char=char)


def keyboard_type(target: KeyboardType) -> Action:
    """Action that switches to the *target* keyboard type."""
    return Action(kind=ActionKind.KEYBOARD_TYPE, keyboard_type=target)


def shift(case: KeyboardCase | None = None) -> Action:
    """Shift key. A shift without *case* is resolved against the active case."""
    return Action(kind=ActionKind.SHIFT, case=case)


BACKSPACE = Action(kind=ActionKind.BACKSPACE)
TAB = Action(kind=ActionKind.TAB)
NEW_LINE = Action(kind=ActionKind.NEW_LINE)
SPACE = Action(kind=ActionKind.SPACE)
SHIFT_LOCK = Action(kind=ActionKind.SHIFT_LOCK)
NEXT_KEYBOARD = Action(kind=ActionKind.NEXT_KEYBOARD)
DICTATION = Action(kind=ActionKind.DICTATION)
DISMISS_KEYBOARD = Action(kind=ActionKind.DISMISS_KEYBOARD)
NONE = Action(kind=ActionKind.NONE)


# --- Text form ---

_SIMPLE_ACTIONS: dict[str, Action] = {
    "backspace": BACKSPACE,
    "tab": TAB,
    "new_line": NEW_LINE,
    "space": SPACE,
    "shift_lock": SHIFT_LOCK,
    "next_keyboard": NEXT_KEYBOARD,
    "dictation": DICTATION,
    "dismiss_keyboard": DISMISS_KEYBOARD,
    "none": NONE,
}

_SIMPLE_NAMES: dict[ActionKind, str] = {a.kind: name for name, a in _SIMPLE_ACTIONS.items()}


def format_action(action: Action) -> str:
    """Canonical text form of *action* (inverse of :func:`parse_action`)."""
    if action.kind is ActionKind.CHARACTER:
        return f"char:{action.char}"
    if action.kind is ActionKind.SHIFT:
        return f"shift:{action.case}" if action.case else "shift"
    if action.kind is ActionKind.KEYBOARD_TYPE:
        return f"keyboard_type:{action.keyboard_type}"
    return _SIMPLE_NAMES[action.kind]


def parse_action(text: str) -> Action:
    """Parse the canonical text form of an action.

    Raises:
        ActionParseError: If *text* is not a known action form.
    """
    if text.startswith("char:"):
        char = text[len("char:") :]
        if not char:
            raise ActionParseError("char action needs a character, e.g. 'char:,'")
        return character(char)

    name = text.strip()
    if name in _SIMPLE_ACTIONS:
        return _SIMPLE_ACTIONS[name]

    head, _, payload = name.partition(":")
    try:
        if head == "shift":
            return shift(KeyboardCase(payload) if payload else None)
        if head == "keyboard_type" and payload:
            return keyboard_type(KeyboardType.parse(payload))
    except ValueError as exc:
        raise ActionParseError(f"Invalid action {text!r}: {exc}") from exc
    raise ActionParseError(f"Unknown action {text!r}")
