"""SettingsService — the persisted toggles and text settings."""

from __future__ import annotations

from browsel.domain.models import Setting, TextSetting, ToggleSetting
from browsel.domain.types import TextKey, ToggleKey
from browsel.services.base import BaseService
from browsel.services.result import ErrorCode, ServiceResult

_TOGGLE_KEYS = frozenset(k.value for k in ToggleKey)
_TEXT_KEYS = frozenset(k.value for k in TextKey)
_TRUE = frozenset({"true", "yes", "on", "1"})
_FALSE = frozenset({"false", "no", "off", "0"})


def parse_toggle(raw: str) -> bool | None:
    """Parse a user-supplied boolean, or None if unrecognized."""
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return None


class SettingsService(BaseService):
    def list_settings(self) -> ServiceResult:
        items = [s.model_dump(mode="json") for s in self._store.settings.list_settings()]
        return ServiceResult(
            ok=True, op="list_settings", data={"count": len(items), "items": items}
        )

    def set_setting(self, key: str, value: str) -> ServiceResult:
        op = "set_setting"
        setting: Setting
        if key in _TOGGLE_KEYS:
            parsed = parse_toggle(value)
            if parsed is None:
                return ServiceResult.failure(
                    op,
                    ErrorCode.INVALID_VALUE,
                    f"{key} expects true/false, got {value!r}",
                    key=key,
                )
            setting = ToggleSetting(key=key, value=parsed)
        elif key in _TEXT_KEYS:
            setting = TextSetting(key=key, value=value)
        else:
            known = sorted(_TOGGLE_KEYS | _TEXT_KEYS)
            return ServiceResult.failure(
                op,
                ErrorCode.UNKNOWN_SETTING,
                f"Unknown setting: {key}. Expected one of {known}",
                key=key,
            )
        self._store.settings.save(setting)
        return ServiceResult(ok=True, op=op, data=setting.model_dump(mode="json"))
