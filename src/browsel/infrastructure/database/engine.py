"""Database engine setup for the SQLite rule store.

SQLAlchemy Core (not ORM) is used because browsel is a short-lived CLI
process: every invocation reads one rule snapshot and exits.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, insert, select
from sqlalchemy.engine import Engine

from browsel.domain.types import TOGGLE_DEFAULTS
from browsel.infrastructure.database.schema import metadata, settings


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(db_path: Path) -> Engine:
    """Initialize the store at *db_path*, creating parent directories.

    Creates all tables and seeds the default toggles. Idempotent: existing
    tables and already-set toggles are left alone.

    Returns the engine ready for use.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path)
    metadata.create_all(engine)
    _seed_settings(engine)
    return engine


def _seed_settings(engine: Engine) -> None:
    """Insert default toggle rows that don't exist yet."""
    with engine.begin() as conn:
        existing = set(conn.execute(select(settings.c.key)).scalars())
        for key, value in TOGGLE_DEFAULTS.items():
            if key.value not in existing:
                conn.execute(insert(settings).values(key=key.value, value=str(value).lower()))
