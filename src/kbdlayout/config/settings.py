"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``KBDLAYOUT_*`` prefix (``__`` for nested sections)
  3. TOML file    — ``kbdlayout.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery and ``read_config`` parser from
:mod:`kbdlayout.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from kbdlayout.config.discovery import find_config, read_config
from kbdlayout.config.models import KeyboardConfig, LayoutConfig
from kbdlayout.domain.input_sets import InputSetProvider


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``kbdlayout.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class KbdSettings(BaseSettings):
    """Unified settings for the kbdlayout CLI.

    Stored on the :class:`~kbdlayout.commands._context.AppContext` at the
    CLI root level and read by the layout service.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "KBDLAYOUT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    keyboard: KeyboardConfig = Field(default_factory=KeyboardConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    input_sets: dict[str, InputSetProvider] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> KbdSettings:
        """Construct settings from a CLI invocation.

        Discovers ``kbdlayout.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
