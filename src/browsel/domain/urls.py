"""URL decomposition into the (domain, path) pair that patterns match against.

The raw value can come straight from an OS shell-launch argument, so
nothing in this module raises on malformed input. Structured parsing is
tried first; when it fails, domain extraction degrades to string slicing.
"""

from __future__ import annotations

from urllib.parse import SplitResult, unquote, urlsplit

from pydantic import BaseModel

_HTTP_PREFIXES = ("http://", "https://")
_WEB_SCHEMES = frozenset({"http", "https"})


class NormalizedUrl(BaseModel):
    """Lowercase host plus raw path of a URL. Derived per lookup, never stored."""

    model_config = {"frozen": True}

    domain: str = ""
    path: str = ""

    @property
    def full(self) -> str:
        """The ``domain + path`` candidate used for full pattern matches."""
        return self.domain + self.path


def _split(raw: str) -> SplitResult:
    """Parse *raw*, forcing lazy validation so bad ports surface here.

    Raises:
        ValueError: If the URL cannot be parsed.
    """
    parts = urlsplit(raw)
    parts.port  # noqa: B018 - urlsplit only validates the port on access
    return parts


def _slice_domain(decoded: str) -> str:
    """Best-effort host extraction for strings the parser rejects."""
    cleaned = decoded
    for prefix in _HTTP_PREFIXES:
        if cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix) :]
            break
    slash = cleaned.find("/")
    host = cleaned[:slash] if slash > 0 else cleaned
    colon = host.find(":")
    return (host[:colon] if colon > 0 else host).lower()


def extract_domain(raw: str | None) -> str:
    """Return the lowercase host of *raw*, without port.

    Returns ``""`` for blank input or when no host can be found.
    """
    if raw is None or not raw.strip():
        return ""
    decoded = unquote(raw)
    try:
        host = _split(decoded).hostname
    except ValueError:
        return _slice_domain(decoded)
    return host.lower() if host else ""


def extract_path(raw: str | None) -> str:
    """Return the path component of *raw* (case preserved), or ``""``."""
    if raw is None or not raw.strip():
        return ""
    try:
        return _split(unquote(raw)).path or ""
    except ValueError:
        return ""


def decompose(raw: str | None) -> NormalizedUrl:
    """Decompose *raw* into its :class:`NormalizedUrl`."""
    return NormalizedUrl(domain=extract_domain(raw), path=extract_path(raw))


def normalize_url(raw: str | None) -> str:
    """Trim *raw* and prepend ``https://`` unless it already has a web scheme.

    Examples:
        >>> normalize_url("google.com")
        'https://google.com'
        >>> normalize_url("  http://x.com  ")
        'http://x.com'
    """
    if raw is None:
        return ""
    trimmed = raw.strip()
    if not trimmed.startswith(_HTTP_PREFIXES):
        return "https://" + trimmed
    return trimmed


def is_valid_url(raw: str | None) -> bool:
    """Whether *raw* is an absolute ``http``/``https`` URL with a host.

    Whitespace anywhere in *raw* makes it invalid, as does an empty host
    (``"http://"``, ``"https:"``).
    """
    if raw is None or not raw.strip() or any(c.isspace() for c in raw):
        return False
    try:
        parts = _split(raw)
    except ValueError:
        return False
    return parts.scheme.lower() in _WEB_SCHEMES and bool(parts.hostname)


def truncate_url(url: str, max_length: int = 60) -> str:
    """Shorten *url* for display, marking the cut with ``...``."""
    if len(url) <= max_length:
        return url
    return url[: max_length - 3] + "..."
