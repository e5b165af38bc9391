"""Keyboard layout — the assembled grid of actions."""

from __future__ import annotations

from pydantic import BaseModel

from kbdlayout.domain.actions import Action, character
from kbdlayout.domain.input_sets import InputRow

ActionRow = tuple[Action, ...]
ActionRows = tuple[ActionRow, ...]


def action_rows_from_characters(rows: tuple[InputRow, ...]) -> ActionRows:
    """Map input rows of characters onto rows of character actions."""
    return tuple(tuple(character(c) for c in row) for row in rows)


class KeyboardLayout(BaseModel):
    """Ordered rows of actions, top to bottom, ready to map onto a visual grid."""

    model_config = {"frozen": True}

    action_rows: ActionRows = ()

    def __len__(self) -> int:
        return len(self.action_rows)

    @property
    def bottom_row(self) -> ActionRow:
        """The space bar row (always last)."""
        return self.action_rows[-1] if self.action_rows else ()
