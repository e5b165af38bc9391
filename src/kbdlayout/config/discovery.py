"""Config file discovery and loading.

Walk-up finder locates kbdlayout.toml, similar to how git finds .git/,
then falls back to the per-user file under XDG_CONFIG_HOME.
Supports KBDLAYOUT_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from kbdlayout.config.models import KbdConfig

CONFIG_FILENAME = "kbdlayout.toml"
CONFIG_ENV_VAR = "KBDLAYOUT_CONFIG"


def user_config_path() -> Path:
    """Per-user config file: $XDG_CONFIG_HOME/kbdlayout/kbdlayout.toml."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "kbdlayout" / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for kbdlayout.toml.

    Returns the path to the config file, or None if not found.
    Checks KBDLAYOUT_CONFIG env var first and the per-user file last.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    user_file = user_config_path()
    if user_file.is_file():
        return user_file
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* and check it against the sparse :class:`KbdConfig` contract.

    Returns the raw TOML mapping so settings sources can layer it under
    env vars and CLI flags. Raises ``click.ClickException`` on malformed
    TOML and ``pydantic.ValidationError`` on invalid section values.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        data: dict[str, Any] = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        import click

        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
    KbdConfig.model_validate(data)
    return data
