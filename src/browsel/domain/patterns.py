"""Wildcard patterns and URL-aware matching.

Pattern grammar (case-insensitive, anchored to the whole candidate):

- ``**`` matches any run of characters, ``/`` included.
- ``*`` matches any run of characters except ``/``.
- ``?`` matches exactly one character.
- Every other character, regex metacharacters included, matches itself.

A URL is matched as ``domain + path`` and as ``domain`` alone. Two
inference rules then reconcile the shorthands rule authors use:

- A bare domain (no ``*``, ``?`` or ``/``) also covers every subdomain.
- A leading ``*.`` also covers the bare base domain.

INVARIANT: the inference rules only run after the direct match fails, and
they are not symmetric (a bare domain with a path gets no subdomain
inference). Existing rules depend on this exact behavior.
"""

from __future__ import annotations

import re
from functools import lru_cache

from browsel.domain.urls import extract_domain, extract_path

WILDCARD_CHARS = frozenset("*?")
_SUBDOMAIN_PREFIX = "*."


def _to_regex(pattern: str) -> str:
    """Translate a wildcard *pattern* into an (unanchored) regex source."""
    parts: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            if i + 1 < n and pattern[i + 1] == "*":
                parts.append(".*")
                i += 2
                continue
            parts.append("[^/]*")
        elif c == "?":
            parts.append(".")
        else:
            parts.append(re.escape(c))
        i += 1
    return "".join(parts)


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile *pattern* (lowercased) into a reusable matcher.

    Use ``fullmatch`` on the result: the matcher is anchored by contract.

    Raises:
        re.error: Never for patterns built by this grammar; declared
            because callers validating user input guard against it.
    """
    return re.compile(_to_regex(pattern.lower()), re.DOTALL)


def matches(pattern: str | None, url: str | None) -> bool:
    """Whether *url* falls under *pattern*.

    Blank or missing arguments never match.
    """
    if pattern is None or url is None or not pattern.strip() or not url.strip():
        return False

    domain = extract_domain(url)
    path = extract_path(url)
    lowered = pattern.lower()

    matcher = compile_pattern(pattern)
    if matcher.fullmatch((domain + path).lower()) or matcher.fullmatch(domain):
        return True

    # Bare domain covers all of its subdomains.
    if not any(c in lowered for c in "*?/"):
        if domain.endswith("." + lowered):
            return True

    # *.example.com also covers example.com itself.
    if lowered.startswith(_SUBDOMAIN_PREFIX):
        if domain == lowered[len(_SUBDOMAIN_PREFIX) :]:
            return True

    return False


def is_valid_pattern(pattern: str | None) -> bool:
    """Whether *pattern* is acceptable for a stored rule.

    A pattern must carry at least one literal (non-wildcard) character.
    """
    if pattern is None or not pattern.strip():
        return False
    literal = "".join(c for c in pattern if c not in WILDCARD_CHARS)
    if not literal.strip():
        return False
    try:
        compile_pattern(pattern)
    except re.error:
        return False
    return True


def domain_to_pattern(domain: str | None) -> str:
    """Suggest a rule pattern for *domain*.

    The domain is returned as-is: bare domains already cover their
    subdomains through :func:`matches`, and wildcarded input is already a
    pattern.
    """
    if domain is None or not domain.strip():
        return ""
    return domain
