"""Config file discovery and loading.

Walk-up finder locates dateranger.toml, similar to how git finds .git/.
Supports DATERANGER_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from dateranger.config.models import DateRangerConfig

CONFIG_FILENAME = "dateranger.toml"
CONFIG_ENV_VAR = "DATERANGER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for dateranger.toml.

    Returns the path to the config file, or None if not found.
    Checks DATERANGER_CONFIG env var first.
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
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def validate_config(data: dict[str, Any], path: Path) -> DateRangerConfig:
    """Validate the ``[output]``, ``[enumerate]`` and ``[resolve]`` tables.

    Keys outside those sections are left to the settings layer.

    Raises:
        click.ClickException: Naming *path* when a section value is invalid.
    """
    try:
        return DateRangerConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid config in {path}:\n{exc}"
        raise click.ClickException(msg) from exc
