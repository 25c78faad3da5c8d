"""Locating garagenet.toml.

Lookup order, first hit wins:

1. ``GARAGENET_CONFIG``: an explicit file; if it does not exist, no config
   is used at all.
2. The nearest ``garagenet.toml`` in the working directory or a parent,
   so a checkout can carry its own endpoint.
3. The per-user file ``$XDG_CONFIG_HOME/garagenet/garagenet.toml``
   (``~/.config/garagenet/garagenet.toml``), where API keys and session
   tokens usually live.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "garagenet.toml"
CONFIG_ENV_VAR = "GARAGENET_CONFIG"


def user_config_path() -> Path:
    """Per-user config file location (may not exist)."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "garagenet" / CONFIG_FILENAME


def _ancestors(start: Path) -> Iterator[Path]:
    current = start.resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file to use, or None when there is none."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    user_file = user_config_path()
    return user_file if user_file.is_file() else None
