"""Key/value settings persistence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from browsel.domain.models import Setting, TextSetting, ToggleSetting
from browsel.domain.types import ToggleKey
from browsel.infrastructure.database.schema import settings

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

_TOGGLE_KEYS = frozenset(k.value for k in ToggleKey)


class SettingsRepository:
    """SQL for the ``settings`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def _raw(self, key: str) -> str | None:
        with self._engine.connect() as conn:
            return conn.execute(
                select(settings.c.value).where(settings.c.key == key)
            ).scalar_one_or_none()

    def get_toggle(self, key: str, default: bool) -> bool:
        raw = self._raw(key)
        if raw is None:
            return default
        return raw.lower() == "true"

    def get_text(self, key: str, default: str | None = None) -> str | None:
        raw = self._raw(key)
        return default if raw is None else raw

    def save(self, setting: Setting) -> None:
        match setting:
            case ToggleSetting(key=key, value=value):
                raw = "true" if value else "false"
            case TextSetting(key=key, value=value):
                raw = value
            case _:
                msg = f"Unsupported setting type: {type(setting).__name__}"
                raise TypeError(msg)
        stmt = sqlite_insert(settings).values(key=key, value=raw)
        stmt = stmt.on_conflict_do_update(index_elements=[settings.c.key], set_={"value": raw})
        with self._engine.begin() as conn:
            conn.execute(stmt)

    def list_settings(self) -> list[Setting]:
        """All stored settings, typed by whether the key is a known toggle."""
        with self._engine.connect() as conn:
            rows = conn.execute(select(settings).order_by(settings.c.key)).all()
        result: list[Setting] = []
        for row in rows:
            if row.key in _TOGGLE_KEYS:
                result.append(ToggleSetting(key=row.key, value=(row.value or "").lower() == "true"))
            else:
                result.append(TextSetting(key=row.key, value=row.value or ""))
        return result
