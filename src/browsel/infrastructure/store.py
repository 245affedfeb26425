"""Store — the rule-store collaborator injected into every service.

Owns the SQLAlchemy engine and exposes one repository per table. The
rules repository doubles as the :class:`~browsel.domain.resolver.RuleSource`
handed to the resolver, so resolution always runs against an explicit
store rather than ambient global state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from browsel.infrastructure.database.engine import init_database
from browsel.infrastructure.repositories import (
    BrowserRepository,
    RuleRepository,
    SettingsRepository,
)

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from browsel.config.settings import BrowselSettings

logger = logging.getLogger(__name__)


class Store:
    """Rules, browsers, and settings backed by one SQLite file."""

    def __init__(self, db_path: Path) -> None:
        self._path = db_path
        self._engine: Engine = init_database(db_path)
        self.rules = RuleRepository(self._engine)
        self.browsers = BrowserRepository(self._engine)
        self.settings = SettingsRepository(self._engine)
        logger.debug("Opened store at %s", db_path)

    @classmethod
    def from_settings(cls, settings: BrowselSettings) -> Store:
        return cls(settings.db_path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()

    def __enter__(self) -> Store:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
