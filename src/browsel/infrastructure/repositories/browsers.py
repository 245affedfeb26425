"""Browser persistence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from browsel.domain.models import Browser
from browsel.infrastructure.database.schema import browsers, url_rules

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def _to_browser(row: Any) -> Browser:
    return Browser(
        id=row.id,
        name=row.name,
        exe_path=Path(row.exe_path),
        icon_path=Path(row.icon_path) if row.icon_path else None,
        profile_arg=row.profile_arg,
        incognito_arg=row.incognito_arg,
        is_profile=bool(row.is_profile),
        parent_browser_id=row.parent_browser_id,
        enabled=bool(row.enabled),
    )


class BrowserRepository:
    """SQL for the ``browsers`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_browsers(self, *, enabled_only: bool = False) -> list[Browser]:
        """Browsers first, then profiles, each alphabetically."""
        stmt = select(browsers).order_by(browsers.c.is_profile, browsers.c.name)
        if enabled_only:
            stmt = stmt.where(browsers.c.enabled == 1)
        with self._engine.connect() as conn:
            return [_to_browser(row) for row in conn.execute(stmt)]

    def get(self, browser_id: str) -> Browser | None:
        with self._engine.connect() as conn:
            row = conn.execute(select(browsers).where(browsers.c.id == browser_id)).first()
        return _to_browser(row) if row is not None else None

    def save(self, browser: Browser) -> None:
        """Insert *browser*, or replace the stored row with the same ID."""
        values = {
            "name": browser.name,
            "exe_path": str(browser.exe_path),
            "icon_path": str(browser.icon_path) if browser.icon_path else None,
            "profile_arg": browser.profile_arg,
            "incognito_arg": browser.incognito_arg,
            "is_profile": int(browser.is_profile),
            "parent_browser_id": browser.parent_browser_id,
            "enabled": int(browser.enabled),
        }
        stmt = sqlite_insert(browsers).values(id=browser.id, **values)
        stmt = stmt.on_conflict_do_update(index_elements=[browsers.c.id], set_=values)
        with self._engine.begin() as conn:
            conn.execute(stmt)

    def delete(self, browser_id: str) -> int:
        """Delete a browser together with the rules that target it.

        Returns the number of rules removed.
        """
        with self._engine.begin() as conn:
            removed = conn.execute(
                delete(url_rules).where(url_rules.c.browser_id == browser_id)
            ).rowcount
            conn.execute(delete(browsers).where(browsers.c.id == browser_id))
        logger.debug("Deleted browser %s and %d rule(s)", browser_id, removed)
        return removed

    def clear(self) -> int:
        """Delete every browser and profile, leaving rules in place.

        Rules keep their targets and resolve again once a browser with the
        same ID is registered.
        """
        with self._engine.begin() as conn:
            removed = conn.execute(delete(browsers)).rowcount
        logger.debug("Cleared %d browser(s)", removed)
        return removed
