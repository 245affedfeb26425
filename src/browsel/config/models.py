"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, browsel.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    filename: str = "browsel.db"


class LaunchConfig(BaseModel):
    """[launch] section."""

    model_config = {"frozen": True}

    detach: bool = True
    default_browser: str | None = None

