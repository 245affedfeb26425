"""SQLite engine and schema for the rule store, via SQLAlchemy Core."""

from browsel.infrastructure.database.engine import create_db_engine, init_database
from browsel.infrastructure.database.schema import browsers, metadata, settings, url_rules

__all__ = [
    "browsers",
    "create_db_engine",
    "init_database",
    "metadata",
    "settings",
    "url_rules",
]
