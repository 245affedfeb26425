"""Well-known setting keys.

Toggles are persisted as ``"true"``/``"false"`` strings; text settings
are persisted verbatim.
"""

from __future__ import annotations

from enum import StrEnum


class ToggleKey(StrEnum):
    """Boolean settings."""

    ADVANCED_MODE = "advanced_mode"
    SHOW_INCOGNITO = "show_incognito"
    DARK_THEME = "dark_theme"
    SYSTEM_THEME = "system_theme"


class TextKey(StrEnum):
    """Free-text settings."""

    LAST_BROWSER = "last_browser"


# Seeded into a fresh store.
TOGGLE_DEFAULTS: dict[ToggleKey, bool] = {
    ToggleKey.ADVANCED_MODE: False,
    ToggleKey.SHOW_INCOGNITO: True,
    ToggleKey.DARK_THEME: False,
    ToggleKey.SYSTEM_THEME: True,
}
