"""BrowserService — registering browsers and profiles by hand.

There is no OS discovery: users register the executables they want
browsel to launch, optionally with per-profile entries.
"""

from __future__ import annotations

from pathlib import Path

from browsel.config.logging import get_logger
from browsel.domain.models import Browser, detect_incognito_arg
from browsel.domain.types import TextKey
from browsel.services.base import BaseService
from browsel.services.result import ErrorCode, ServiceResult

logger = get_logger(__name__)


class BrowserService(BaseService):
    """Add, list, toggle, and remove browsers."""

    def add_browser(
        self,
        browser_id: str,
        name: str,
        exe_path: Path | str,
        *,
        icon_path: Path | str | None = None,
        profile_arg: str | None = None,
        incognito_arg: str | None = None,
    ) -> ServiceResult:
        """Register (or replace) a browser.

        The private-window flag is inferred from *name* unless given.
        """
        op = "add_browser"
        browser_id = browser_id.strip()
        if not browser_id or not name.strip():
            return ServiceResult.failure(
                op, ErrorCode.INVALID_VALUE, "Browser ID and name must not be empty"
            )

        existing = self._store.browsers.get(browser_id)
        browser = Browser(
            id=browser_id,
            name=name.strip(),
            exe_path=Path(exe_path),
            icon_path=Path(icon_path) if icon_path else None,
            profile_arg=profile_arg,
            incognito_arg=incognito_arg or detect_incognito_arg(name),
            enabled=existing.enabled if existing is not None else True,
        )
        self._store.browsers.save(browser)
        logger.info("browser_saved", browser_id=browser.id, exe_path=str(browser.exe_path))

        warnings: list[str] = []
        if existing is not None:
            warnings.append(f"Replaced existing browser {browser_id}")
        if not browser.exe_path.exists():
            warnings.append(f"Executable not found: {browser.exe_path}")
        return ServiceResult(ok=True, op=op, data=self._browser_data(browser), warnings=warnings)

    def add_profile(
        self,
        parent_id: str,
        profile_id: str,
        name: str,
        profile_arg: str,
    ) -> ServiceResult:
        """Register a profile that launches *parent_id* with *profile_arg*."""
        op = "add_profile"
        parent = self._store.browsers.get(parent_id)
        if parent is None:
            return ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, f"No browser with ID: {parent_id}", browser_id=parent_id
            )
        if parent.is_profile:
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_VALUE,
                f"{parent_id} is itself a profile; add profiles to its browser instead",
            )
        if not profile_arg.strip():
            return ServiceResult.failure(
                op, ErrorCode.INVALID_VALUE, "Profile argument must not be empty"
            )
        profile = parent.with_profile(profile_id, name, profile_arg)
        self._store.browsers.save(profile)
        return ServiceResult(ok=True, op=op, data=self._browser_data(profile))

    def list_browsers(self, *, enabled_only: bool = False) -> ServiceResult:
        last = self._store.settings.get_text(TextKey.LAST_BROWSER)
        items = []
        for browser in self._store.browsers.list_browsers(enabled_only=enabled_only):
            data = self._browser_data(browser)
            data["last_used"] = browser.id == last
            items.append(data)
        return ServiceResult(
            ok=True, op="list_browsers", data={"count": len(items), "items": items}
        )

    def remove_browser(self, browser_id: str) -> ServiceResult:
        """Delete a browser and every rule that targets it."""
        op = "remove_browser"
        if self._store.browsers.get(browser_id) is None:
            return ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, f"No browser with ID: {browser_id}", browser_id=browser_id
            )
        removed = self._store.browsers.delete(browser_id)
        return ServiceResult(ok=True, op=op, data={"id": browser_id, "rules_removed": removed})

    def clear_browsers(self) -> ServiceResult:
        """Forget every registered browser. Rules are kept."""
        removed = self._store.browsers.clear()
        logger.info("browsers_cleared", count=removed)
        return ServiceResult(ok=True, op="clear_browsers", data={"browsers_removed": removed})

    def set_enabled(self, browser_id: str, enabled: bool) -> ServiceResult:
        """Enable or disable a browser. Rules targeting a disabled browser stop routing."""
        op = "enable_browser" if enabled else "disable_browser"
        browser = self._store.browsers.get(browser_id)
        if browser is None:
            return ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, f"No browser with ID: {browser_id}", browser_id=browser_id
            )
        updated = browser.with_enabled(enabled)
        self._store.browsers.save(updated)
        return ServiceResult(ok=True, op=op, data=self._browser_data(updated))
