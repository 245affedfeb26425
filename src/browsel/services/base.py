"""BaseService — shared foundation for browsel services.

Every service receives the :class:`Store` at construction time instead of
reaching for a process-wide connection, so tests and callers decide which
store a service works against.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from browsel.domain.models import Browser, Rule
    from browsel.infrastructure.store import Store


class BaseService:
    """Base for all service-layer classes."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def _rule_data(self, rule: Rule) -> dict[str, Any]:
        """Serialize *rule*, adding the target browser's name when known."""
        data = rule.model_dump(mode="json")
        browser = self._store.browsers.get(rule.target)
        data["browser_name"] = browser.name if browser is not None else None
        return data

    @staticmethod
    def _browser_data(browser: Browser) -> dict[str, Any]:
        return browser.model_dump(mode="json")
