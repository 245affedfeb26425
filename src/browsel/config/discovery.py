"""Config file discovery and default locations.

Walk-up finder locates browsel.toml, similar to how git finds .git/.
Supports BROWSEL_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "browsel.toml"
CONFIG_ENV_VAR = "BROWSEL_CONFIG"
DATA_DIR_NAME = "browsel"


def default_data_dir() -> Path:
    """Where the store lives when nothing overrides it.

    ``%APPDATA%/browsel`` on Windows, ``~/.browsel`` elsewhere.
    """
    app_data = os.environ.get("APPDATA")
    if app_data:
        return Path(app_data) / DATA_DIR_NAME
    return Path.home() / f".{DATA_DIR_NAME}"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for browsel.toml.

    Returns the path to the config file, or None if not found.
    Checks BROWSEL_CONFIG env var first.
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

