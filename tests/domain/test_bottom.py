"""Tests for the bottom row builders."""

import pytest

from kbdlayout.domain.actions import (
    DICTATION,
    DISMISS_KEYBOARD,
    NEW_LINE,
    NEXT_KEYBOARD,
    SPACE,
    character,
    keyboard_type,
)
from kbdlayout.domain.bottom import (
    BOTTOM_ROW_BUILDERS,
    DICTATION_SUPPORTED,
    phone_bottom_row,
    tablet_bottom_row,
)
from kbdlayout.domain.context import KeyboardContext
from kbdlayout.domain.types import DeviceClass, KeyboardType

from tests.conftest import bare_context

LEFT = character(",")
RIGHT = character(".")
TO_NUMERIC = keyboard_type(KeyboardType.numeric())


class TestTabletBottomRow:
    def test_minimal(self) -> None:
        assert tablet_bottom_row(bare_context()) == (NEXT_KEYBOARD, SPACE, DISMISS_KEYBOARD)

    def test_switcher_on_both_sides(self) -> None:
        row = tablet_bottom_row(KeyboardContext())
        assert row == (NEXT_KEYBOARD, TO_NUMERIC, SPACE, TO_NUMERIC, DISMISS_KEYBOARD)

    def test_switch_key_moves_after_switcher(self) -> None:
        context = KeyboardContext(needs_input_mode_switch_key=True)
        row = tablet_bottom_row(context)
        assert row == (TO_NUMERIC, NEXT_KEYBOARD, SPACE, TO_NUMERIC, DISMISS_KEYBOARD)

    def test_space_flank_actions(self) -> None:
        row = tablet_bottom_row(bare_context(), LEFT, RIGHT)
        assert row == (NEXT_KEYBOARD, LEFT, SPACE, RIGHT, DISMISS_KEYBOARD)

    def test_only_left_flank(self) -> None:
        row = tablet_bottom_row(bare_context(), left_space_action=LEFT)
        assert row == (NEXT_KEYBOARD, LEFT, SPACE, DISMISS_KEYBOARD)


class TestPhoneBottomRow:
    def test_minimal(self) -> None:
        assert phone_bottom_row(bare_context()) == (SPACE, NEW_LINE)

    def test_switcher_first(self) -> None:
        assert phone_bottom_row(KeyboardContext()) == (TO_NUMERIC, SPACE, NEW_LINE)

    def test_switch_key(self) -> None:
        context = KeyboardContext(needs_input_mode_switch_key=True)
        assert phone_bottom_row(context) == (TO_NUMERIC, NEXT_KEYBOARD, SPACE, NEW_LINE)

    def test_no_next_keyboard_without_switch_key(self) -> None:
        assert NEXT_KEYBOARD not in phone_bottom_row(KeyboardContext())

    def test_space_flank_actions(self) -> None:
        row = phone_bottom_row(bare_context(), LEFT, RIGHT)
        assert row == (LEFT, SPACE, RIGHT, NEW_LINE)

    def test_only_right_flank(self) -> None:
        row = phone_bottom_row(bare_context(), right_space_action=RIGHT)
        assert row == (SPACE, RIGHT, NEW_LINE)


class TestDictation:
    def test_reserved_and_disabled(self) -> None:
        assert DICTATION_SUPPORTED is False

    @pytest.mark.parametrize("device", list(DeviceClass))
    def test_context_flag_does_not_enable(self, device: DeviceClass) -> None:
        context = KeyboardContext(device=device, has_dictation_key=True)
        assert DICTATION not in BOTTOM_ROW_BUILDERS[device](context)


@pytest.mark.parametrize("device", list(DeviceClass))
@pytest.mark.parametrize("needs_switch_key", [False, True])
def test_next_keyboard_at_most_once(device: DeviceClass, needs_switch_key: bool) -> None:
    context = KeyboardContext(device=device, needs_input_mode_switch_key=needs_switch_key)
    row = BOTTOM_ROW_BUILDERS[device](context, LEFT, RIGHT)
    expected = 1 if needs_switch_key or device is DeviceClass.TABLET else 0
    assert row.count(NEXT_KEYBOARD) == expected
    assert row.count(SPACE) == 1
