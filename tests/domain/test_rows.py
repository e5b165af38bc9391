"""Tests for row decoration policies."""

import pytest

from kbdlayout.domain.actions import BACKSPACE, NEW_LINE, SHIFT_LOCK, TAB, keyboard_type, shift
from kbdlayout.domain.context import KeyboardContext
from kbdlayout.domain.rows import (
    PHONE_ROW_POLICIES,
    ROW_POLICIES,
    TABLET_ROW_POLICIES,
    RowPolicy,
    always,
    compose_rows,
    nothing,
    side_switcher,
    unless_mode_switch_key,
)
from kbdlayout.domain.types import DeviceClass, KeyboardCase, KeyboardType

from tests.conftest import BASE_ROWS, bare_context, chars


class TestRules:
    def test_nothing(self) -> None:
        assert nothing(KeyboardContext()) == ()

    def test_always(self) -> None:
        assert always(TAB)(KeyboardContext()) == (TAB,)

    def test_unless_mode_switch_key(self) -> None:
        rule = unless_mode_switch_key(TAB)
        assert rule(KeyboardContext(needs_input_mode_switch_key=False)) == (TAB,)
        assert rule(KeyboardContext(needs_input_mode_switch_key=True)) == ()

    def test_side_switcher_defined(self) -> None:
        context = KeyboardContext(keyboard_type=KeyboardType.numeric())
        assert side_switcher(context) == (keyboard_type(KeyboardType.symbolic()),)

    def test_side_switcher_undefined(self) -> None:
        assert side_switcher(bare_context()) == ()

    def test_policy_decorate(self) -> None:
        policy = RowPolicy(leading=always(TAB), trailing=always(BACKSPACE))
        assert policy.decorate(KeyboardContext(), chars("ab")) == (TAB, *chars("ab"), BACKSPACE)


class TestTabletPolicy:
    def test_rows_without_switch_key(self) -> None:
        rows = compose_rows(bare_context(), BASE_ROWS, TABLET_ROW_POLICIES)
        assert rows[0] == (TAB, *BASE_ROWS[0], BACKSPACE)
        assert rows[1] == (SHIFT_LOCK, *BASE_ROWS[1], NEW_LINE)
        assert rows[2] == BASE_ROWS[2]

    def test_rows_with_switch_key(self) -> None:
        context = bare_context(needs_input_mode_switch_key=True)
        rows = compose_rows(context, BASE_ROWS, TABLET_ROW_POLICIES)
        assert rows[0] == (*BASE_ROWS[0], BACKSPACE)
        assert rows[1] == (*BASE_ROWS[1], NEW_LINE)

    def test_side_switcher_mirrored(self) -> None:
        context = KeyboardContext(
            device=DeviceClass.TABLET,
            keyboard_type=KeyboardType.alphabetic(KeyboardCase.UPPERCASED),
        )
        rows = compose_rows(context, BASE_ROWS, TABLET_ROW_POLICIES)
        switcher = shift(KeyboardCase.UPPERCASED)
        assert rows[2] == (switcher, *BASE_ROWS[2], switcher)


class TestPhonePolicy:
    @pytest.mark.parametrize("needs_switch_key", [False, True])
    def test_upper_rows_unchanged(self, needs_switch_key: bool) -> None:
        context = bare_context(needs_input_mode_switch_key=needs_switch_key)
        rows = compose_rows(context, BASE_ROWS, PHONE_ROW_POLICIES)
        assert rows[0] == BASE_ROWS[0]
        assert rows[1] == BASE_ROWS[1]

    def test_third_row_backspace(self) -> None:
        rows = compose_rows(bare_context(), BASE_ROWS, PHONE_ROW_POLICIES)
        assert rows[2] == (*BASE_ROWS[2], BACKSPACE)

    def test_third_row_side_switcher(self) -> None:
        context = KeyboardContext(keyboard_type=KeyboardType.alphabetic())
        rows = compose_rows(context, BASE_ROWS, PHONE_ROW_POLICIES)
        assert rows[2] == (shift(KeyboardCase.LOWERCASED), *BASE_ROWS[2], BACKSPACE)


class TestComposeRows:
    @pytest.mark.parametrize("device", list(DeviceClass))
    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_fewer_rows_tolerated(self, device: DeviceClass, count: int) -> None:
        rows = compose_rows(bare_context(), BASE_ROWS[:count], ROW_POLICIES[device])
        assert len(rows) == count

    @pytest.mark.parametrize("device", list(DeviceClass))
    def test_extra_rows_pass_through(self, device: DeviceClass) -> None:
        extra = chars("!?")
        rows = compose_rows(bare_context(), (*BASE_ROWS, extra), ROW_POLICIES[device])
        assert len(rows) == 4
        assert rows[3] == extra

    @pytest.mark.parametrize("device", list(DeviceClass))
    def test_original_characters_kept_in_order(self, device: DeviceClass) -> None:
        rows = compose_rows(KeyboardContext(), BASE_ROWS, ROW_POLICIES[device])
        for original, decorated in zip(BASE_ROWS, rows, strict=True):
            assert tuple(a for a in decorated if a.is_character) == original
