"""SQLAlchemy Core table definitions for the browsel store.

Timestamps are stored as ISO 8601 text; booleans as 0/1 integers.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text

metadata = MetaData()

browsers = Table(
    "browsers",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("exe_path", Text, nullable=False),
    Column("icon_path", Text),
    Column("profile_arg", Text),
    Column("incognito_arg", Text),
    Column("is_profile", Integer, default=0, server_default="0"),
    Column("parent_browser_id", Text),
    Column("enabled", Integer, default=1, server_default="1"),
)

url_rules = Table(
    "url_rules",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("pattern", Text, nullable=False, unique=True),
    Column("browser_id", Text, nullable=False),
    Column("priority", Integer, nullable=False, default=0, server_default="0"),
    Column("created_at", Text, nullable=False),
    sqlite_autoincrement=True,
)

settings = Table(
    "settings",
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", Text),
)

# Resolution reads rules in (priority DESC, id ASC) order on every lookup.
Index("ix_url_rules_order", url_rules.c.priority.desc(), url_rules.c.id)
Index("ix_url_rules_browser", url_rules.c.browser_id)
