"""Locate and read ``adschema.toml``.

Lookup order: an explicit ``--config`` path, then ``$ADSCHEMA_CONFIG``,
then the nearest ``adschema.toml`` in the working directory or one of its
parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from adschema.config.models import SchemaConfig

CONFIG_FILENAME = "adschema.toml"
CONFIG_ENV_VAR = "ADSCHEMA_CONFIG"


class ConfigFileError(ValueError):
    """An ``adschema.toml`` exists but cannot be used."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, reason)
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid config {self.path}: {self.reason}"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd).

    A set ``ADSCHEMA_CONFIG`` wins outright: if it names a missing file the
    result is None and no walk-up happens.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path).expanduser()
        return candidate if candidate.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(
    explicit: str | Path | None = None, start: Path | None = None
) -> Path | None:
    """Apply ``--config`` before falling back to :func:`find_config`."""
    if explicit:
        candidate = Path(explicit).expanduser()
        return candidate if candidate.is_file() else None
    return find_config(start)


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ConfigFileError: The file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(path, f"bad TOML ({exc})") from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> SchemaConfig:
    """Read the ``[validation]``/``[output]`` sections into a SchemaConfig.

    Used by library callers that want catalog behaviour without the CLI
    settings chain. Top-level CLI keys (``quiet`` and friends) are ignored.
    Missing file means all defaults.
    """
    path = path or find_config(cwd)
    if path is None:
        return SchemaConfig()

    data = read_config(path)
    sections = {key: data[key] for key in SchemaConfig.model_fields if key in data}
    try:
        return SchemaConfig.model_validate(sections)
    except ValidationError as exc:
        raise ConfigFileError(path, str(exc)) from exc
