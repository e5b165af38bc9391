"""LayoutService — resolves a context from settings and composes its layout.

Context values come from the ``[keyboard]`` config section, overridden
per call. Locale input sets come from ``[input_sets.<locale>]`` or the
built-in sets; an unknown locale falls back to English with a warning.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from kbdlayout.domain.actions import Action, ActionParseError, format_action, parse_action
from kbdlayout.domain.context import KeyboardContext
from kbdlayout.domain.input_sets import BUILTIN_INPUT_SETS, DEFAULT_LOCALE, InputSetProvider
from kbdlayout.domain.layout import ActionRows
from kbdlayout.domain.provider import StandardLayoutProvider
from kbdlayout.domain.switchers import STANDARD_SWITCHERS, SwitcherTable
from kbdlayout.domain.types import DeviceClass, KeyboardType, Orientation
from kbdlayout.services.result import ServiceResult

if TYPE_CHECKING:
    from kbdlayout.config.settings import KbdSettings

logger = structlog.get_logger(__name__)


def _rows_as_text(rows: ActionRows) -> list[list[str]]:
    return [[format_action(action) for action in row] for row in rows]


class LayoutService:
    """Layout operations driven by :class:`KbdSettings`."""

    def __init__(self, settings: KbdSettings) -> None:
        self._settings = settings

    # --- Context resolution ---

    def resolve_input_sets(self, locale: str) -> tuple[InputSetProvider, str | None]:
        """Find input sets for *locale*.

        Tries the exact locale, then its language part (``de_CH`` -> ``de``),
        configured sets before built-in ones. Returns ``(provider, warning)``.
        """
        available = {**BUILTIN_INPUT_SETS, **self._settings.input_sets}
        language = locale.replace("-", "_").split("_", 1)[0]
        for candidate in (locale, language):
            if candidate in available:
                return available[candidate], None
        warning = f"No input sets for locale {locale!r}, using {DEFAULT_LOCALE!r}"
        return available[DEFAULT_LOCALE], warning

    def build_context(
        self,
        *,
        device: DeviceClass | None = None,
        keyboard_type: KeyboardType | None = None,
        orientation: Orientation | None = None,
        locale: str | None = None,
        needs_input_mode_switch_key: bool | None = None,
        switchers: bool | None = None,
    ) -> tuple[KeyboardContext, list[str]]:
        """Build a context from config defaults and explicit overrides.

        Returns the context and any warnings raised while resolving it.
        """
        defaults = self._settings.keyboard
        resolved_locale = locale or defaults.locale
        provider, warning = self.resolve_input_sets(resolved_locale)

        if switchers is None:
            switchers = self._settings.layout.switchers == "standard"

        context = KeyboardContext(
            device=device or defaults.device,
            keyboard_type=keyboard_type or KeyboardType.alphabetic(),
            orientation=orientation or defaults.orientation,
            locale=resolved_locale,
            needs_input_mode_switch_key=(
                defaults.needs_input_mode_switch_key
                if needs_input_mode_switch_key is None
                else needs_input_mode_switch_key
            ),
            has_dictation_key=defaults.has_dictation_key,
            has_full_access=defaults.has_full_access,
            input_set_provider=provider,
            switchers=STANDARD_SWITCHERS if switchers else SwitcherTable.empty(),
        )
        return context, [warning] if warning else []

    # --- Operations ---

    def compute(
        self,
        context: KeyboardContext | None = None,
        *,
        left_space_action: str | None = None,
        right_space_action: str | None = None,
        **overrides: Any,
    ) -> ServiceResult:
        """Compose the layout for *context* (or one built from *overrides*).

        Space actions given as text override the ``[layout]`` config section.
        Context overrides are only accepted when no *context* is passed.
        """
        if context is not None and overrides:
            raise TypeError(
                f"compute() got context overrides with an explicit context: {sorted(overrides)}"
            )
        op = "compute_layout"
        warnings: list[str] = []
        if context is None:
            context, warnings = self.build_context(**overrides)

        updates: dict[str, Action] = {}
        try:
            if left_space_action:
                updates["left_space_action"] = parse_action(left_space_action)
            if right_space_action:
                updates["right_space_action"] = parse_action(right_space_action)
        except ActionParseError as exc:
            return ServiceResult.failure(op, "INVALID_ACTION", str(exc))
        provider = StandardLayoutProvider.from_config(
            self._settings.layout.model_copy(update=updates)
        )

        base_rows = context.action_rows
        layout = provider.keyboard_layout(context, base_rows)
        logger.debug(
            "layout.computed",
            device=str(context.device),
            keyboard_type=str(context.keyboard_type),
            base_rows=len(base_rows),
            rows=len(layout),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "device": str(context.device),
                "keyboard_type": str(context.keyboard_type),
                "locale": context.locale,
                "base_row_count": len(base_rows),
                "rows": _rows_as_text(layout.action_rows),
            },
            warnings=warnings,
        )

    def input_set(
        self,
        keyboard_type: KeyboardType | None = None,
        locale: str | None = None,
    ) -> ServiceResult:
        """Base character rows for *keyboard_type* in *locale*."""
        context, warnings = self.build_context(keyboard_type=keyboard_type, locale=locale)
        return ServiceResult(
            ok=True,
            op="input_set",
            data={
                "keyboard_type": str(context.keyboard_type),
                "locale": context.locale,
                "rows": [list(row) for row in context.input_set.rows],
            },
            warnings=warnings,
        )
