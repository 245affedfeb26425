"""RuleService — managing URL rules and trying patterns out."""

from __future__ import annotations

from browsel.config.logging import get_logger
from browsel.domain.models import Rule
from browsel.domain.patterns import is_valid_pattern, matches
from browsel.domain.urls import decompose, is_valid_url, normalize_url
from browsel.services.base import BaseService
from browsel.services.result import ErrorCode, ServiceResult

logger = get_logger(__name__)


class RuleService(BaseService):
    """Create, list, reorder, and delete rules."""

    def add_rule(self, pattern: str, browser_id: str, *, priority: int = 0) -> ServiceResult:
        """Store a rule sending *pattern* to *browser_id*.

        An existing rule with the same pattern is retargeted rather than
        duplicated (patterns are unique in the store).
        """
        op = "add_rule"
        pattern = pattern.strip()
        if not is_valid_pattern(pattern):
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_PATTERN,
                f"Pattern must contain at least one non-wildcard character: {pattern!r}",
                pattern=pattern,
            )
        if self._store.browsers.get(browser_id) is None:
            return ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, f"No browser with ID: {browser_id}", browser_id=browser_id
            )

        warnings: list[str] = []
        existing = self._store.rules.find_by_pattern(pattern)
        if existing is not None:
            warnings.append(f"Replaced rule {existing.id} ({pattern} -> {existing.target})")
            rule = existing.model_copy(update={"target": browser_id, "priority": priority})
        else:
            rule = Rule(pattern=pattern, target=browser_id, priority=priority)

        stored = self._store.rules.save(rule)
        logger.info("rule_saved", rule_id=stored.id, pattern=stored.pattern, target=stored.target)
        return ServiceResult(ok=True, op=op, data=self._rule_data(stored), warnings=warnings)

    def list_rules(self) -> ServiceResult:
        """All rules in resolution order."""
        items = [self._rule_data(rule) for rule in self._store.rules.list_rules()]
        return ServiceResult(ok=True, op="list_rules", data={"count": len(items), "items": items})

    def remove_rule(self, rule_id: int) -> ServiceResult:
        op = "remove_rule"
        if not self._store.rules.delete(rule_id):
            return ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, f"No rule with ID: {rule_id}", rule_id=rule_id
            )
        return ServiceResult(ok=True, op=op, data={"id": rule_id})

    def remove_rules_for(self, browser_id: str) -> ServiceResult:
        """Delete every rule that targets *browser_id*, registered or not."""
        removed = self._store.rules.delete_for_browser(browser_id)
        logger.info("rules_cleared", browser_id=browser_id, count=removed)
        return ServiceResult(
            ok=True,
            op="clear_rules",
            data={"browser_id": browser_id, "rules_removed": removed},
        )

    def set_priority(self, rule_id: int, priority: int) -> ServiceResult:
        op = "set_priority"
        rule = self._store.rules.get(rule_id)
        if rule is None:
            return ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, f"No rule with ID: {rule_id}", rule_id=rule_id
            )
        stored = self._store.rules.save(rule.with_priority(priority))
        return ServiceResult(ok=True, op=op, data=self._rule_data(stored))

    def swap_priority(self, first_id: int, second_id: int) -> ServiceResult:
        """Exchange two rules' priorities (moving one above the other)."""
        op = "swap_priority"
        swapped = self._store.rules.swap_priority(first_id, second_id)
        if swapped is None:
            return ServiceResult.failure(
                op,
                ErrorCode.NOT_FOUND,
                f"Both rules must exist: {first_id}, {second_id}",
                rule_ids=[first_id, second_id],
            )
        first, second = swapped
        warnings: list[str] = []
        if first.priority == second.priority:
            warnings.append("Rules share a priority; the older rule still wins")
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": [self._rule_data(first), self._rule_data(second)]},
            warnings=warnings,
        )

    def test_pattern(self, pattern: str, url: str) -> ServiceResult:
        """Report whether *pattern* would match *url*, without storing anything.

        Scheme-less input is normalized first, the same way ``open`` does.
        """
        target = url if is_valid_url(url) else normalize_url(url)
        parts = decompose(target)
        valid = is_valid_pattern(pattern)
        warnings = [] if valid else [f"Pattern would be rejected by the store: {pattern!r}"]
        return ServiceResult(
            ok=True,
            op="match",
            data={
                "pattern": pattern,
                "url": target,
                "domain": parts.domain,
                "path": parts.path,
                "valid": valid,
                "matched": matches(pattern, target),
            },
            warnings=warnings,
        )
