"""browsel — route URLs to the right browser with wildcard rules."""

__version__ = "0.3.0"
