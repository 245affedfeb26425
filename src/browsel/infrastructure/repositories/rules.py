"""Rule persistence and the ordered snapshot handed to the resolver."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update

from browsel.domain.models import Rule
from browsel.domain.patterns import is_valid_pattern
from browsel.infrastructure.database.schema import url_rules

if TYPE_CHECKING:
    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def _to_rule(row: Any) -> Rule:
    return Rule(
        id=row.id,
        pattern=row.pattern,
        target=row.browser_id,
        priority=row.priority,
        created_at=datetime.fromisoformat(row.created_at),
    )


class RuleRepository:
    """SQL for the ``url_rules`` table.

    Satisfies :class:`browsel.domain.resolver.RuleSource`.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_rules(self) -> list[Rule]:
        """All rules, ordered ``priority`` descending then ``id`` ascending."""
        stmt = select(url_rules).order_by(url_rules.c.priority.desc(), url_rules.c.id.asc())
        with self._engine.connect() as conn:
            return [_to_rule(row) for row in conn.execute(stmt)]

    def get(self, rule_id: int) -> Rule | None:
        with self._engine.connect() as conn:
            return self._get(conn, rule_id)

    def find_by_pattern(self, pattern: str) -> Rule | None:
        with self._engine.connect() as conn:
            row = conn.execute(select(url_rules).where(url_rules.c.pattern == pattern)).first()
        return _to_rule(row) if row is not None else None

    def save(self, rule: Rule) -> Rule:
        """Insert or update *rule* and return the stored version.

        Rows are matched by ``rule.id`` when positive, otherwise by pattern,
        so saving a pattern that already exists retargets that rule.

        Raises:
            ValueError: If the pattern fails :func:`is_valid_pattern`.
        """
        if not is_valid_pattern(rule.pattern):
            msg = f"Invalid rule pattern: {rule.pattern!r}"
            raise ValueError(msg)

        values = {
            "pattern": rule.pattern,
            "browser_id": rule.target,
            "priority": rule.priority,
        }
        with self._engine.begin() as conn:
            rule_id: int | None = rule.id if rule.id > 0 else None
            if rule_id is None:
                rule_id = conn.execute(
                    select(url_rules.c.id).where(url_rules.c.pattern == rule.pattern)
                ).scalar_one_or_none()

            updated = 0
            if rule_id is not None:
                updated = conn.execute(
                    update(url_rules).where(url_rules.c.id == rule_id).values(**values)
                ).rowcount

            if not updated:
                row_values: dict[str, Any] = {**values, "created_at": rule.created_at.isoformat()}
                if rule_id is not None:
                    row_values["id"] = rule_id
                result = conn.execute(insert(url_rules).values(**row_values))
                rule_id = int(result.inserted_primary_key[0])
                logger.debug("Inserted rule %s: %s -> %s", rule_id, rule.pattern, rule.target)

            stored = self._get(conn, rule_id)
        assert stored is not None
        return stored

    def swap_priority(self, first_id: int, second_id: int) -> tuple[Rule, Rule] | None:
        """Exchange the priorities of two rules atomically.

        Returns the updated pair, or None if either rule does not exist.
        """
        with self._engine.begin() as conn:
            first = self._get(conn, first_id)
            second = self._get(conn, second_id)
            if first is None or second is None:
                return None
            conn.execute(
                update(url_rules)
                .where(url_rules.c.id == first_id)
                .values(priority=second.priority)
            )
            conn.execute(
                update(url_rules)
                .where(url_rules.c.id == second_id)
                .values(priority=first.priority)
            )
        return first.with_priority(second.priority), second.with_priority(first.priority)

    def delete(self, rule_id: int) -> bool:
        """Delete a rule. Returns False if it did not exist."""
        with self._engine.begin() as conn:
            result = conn.execute(delete(url_rules).where(url_rules.c.id == rule_id))
        return result.rowcount > 0

    def delete_for_browser(self, browser_id: str) -> int:
        """Delete every rule targeting *browser_id*. Returns how many went."""
        with self._engine.begin() as conn:
            result = conn.execute(delete(url_rules).where(url_rules.c.browser_id == browser_id))
        return result.rowcount

    @staticmethod
    def _get(conn: Connection, rule_id: int) -> Rule | None:
        row = conn.execute(select(url_rules).where(url_rules.c.id == rule_id)).first()
        return _to_rule(row) if row is not None else None
