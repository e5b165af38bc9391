"""Row composition — leading/trailing auxiliary keys for the character rows.

Each device class has a static policy table with one entry per decorated
row (rows 0, 1 and 2). An entry holds two rules that compute the leading
and trailing actions from the context::

    decorated = leading(context) + row + trailing(context)

Rows without a policy entry pass through unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from kbdlayout.domain.actions import BACKSPACE, NEW_LINE, SHIFT_LOCK, TAB, Action
from kbdlayout.domain.context import KeyboardContext
from kbdlayout.domain.layout import ActionRow, ActionRows
from kbdlayout.domain.types import DeviceClass

RowRule = Callable[[KeyboardContext], ActionRow]


@dataclass(frozen=True)
class RowPolicy:
    """Leading and trailing rules for a single row."""

    leading: RowRule
    trailing: RowRule

    def decorate(self, context: KeyboardContext, row: ActionRow) -> ActionRow:
        return self.leading(context) + row + self.trailing(context)


# --- Rules ---


def nothing(context: KeyboardContext) -> ActionRow:
    return ()


def always(action: Action) -> RowRule:
    """Rule that yields *action* regardless of context."""

    def rule(context: KeyboardContext) -> ActionRow:
        return (action,)

    return rule


def unless_mode_switch_key(action: Action) -> RowRule:
    """Rule that yields *action* only when no input mode switch key is needed."""

    def rule(context: KeyboardContext) -> ActionRow:
        return () if context.needs_input_mode_switch_key else (action,)

    return rule


def side_switcher(context: KeyboardContext) -> ActionRow:
    """The mode's side switcher action, if it defines one."""
    action = context.standard_side_switcher_action
    return (action,) if action is not None else ()


# --- Policy tables ---

TABLET_ROW_POLICIES: tuple[RowPolicy, ...] = (
    RowPolicy(leading=unless_mode_switch_key(TAB), trailing=always(BACKSPACE)),
    RowPolicy(leading=unless_mode_switch_key(SHIFT_LOCK), trailing=always(NEW_LINE)),
    RowPolicy(leading=side_switcher, trailing=side_switcher),
)

PHONE_ROW_POLICIES: tuple[RowPolicy, ...] = (
    RowPolicy(leading=nothing, trailing=nothing),
    RowPolicy(leading=nothing, trailing=nothing),
    RowPolicy(leading=side_switcher, trailing=always(BACKSPACE)),
)

ROW_POLICIES: dict[DeviceClass, tuple[RowPolicy, ...]] = {
    DeviceClass.TABLET: TABLET_ROW_POLICIES,
    DeviceClass.PHONE: PHONE_ROW_POLICIES,
}


def compose_rows(
    context: KeyboardContext,
    rows: ActionRows,
    policies: tuple[RowPolicy, ...],
) -> ActionRows:
    """Decorate *rows* with the leading/trailing actions of *policies*.

    Rows are matched to policies by index; missing rows are skipped and
    rows past the end of *policies* are returned unchanged.
    """
    return tuple(
        policies[index].decorate(context, row) if index < len(policies) else row
        for index, row in enumerate(rows)
    )
