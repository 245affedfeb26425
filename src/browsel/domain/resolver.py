"""First-match rule resolution.

INVARIANT: rules arrive already ordered by ``priority`` descending, then
``id`` ascending. The resolver never re-sorts; all tie-breaking lives in
that ordering contract, which the rule store owns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from browsel.domain.patterns import matches

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from browsel.domain.models import Rule


class RuleSource(Protocol):
    """Anything that can hand out an ordered snapshot of rules."""

    def list_rules(self) -> Sequence[Rule]: ...


def resolve(rules: Iterable[Rule], url: str | None) -> Rule | None:
    """Return the first rule in *rules* whose pattern matches *url*."""
    for rule in rules:
        if matches(rule.pattern, url):
            return rule
    return None


def resolve_from(source: RuleSource, url: str | None) -> Rule | None:
    """Resolve *url* against a snapshot taken from *source*."""
    return resolve(source.list_rules(), url)
