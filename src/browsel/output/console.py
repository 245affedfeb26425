"""Rich Console factory and theme for browsel output.

Consoles render into a StringIO buffer so formatting stays a pure
``ServiceResult -> str`` function. Under Click's CliRunner and in pipes
Rich detects no terminal and emits plain text.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BROWSEL_THEME = Theme(
    {
        "browsel.ok": "bold green",
        "browsel.error": "bold red",
        "browsel.warning": "bold yellow",
        "browsel.op": "bold cyan",
        "browsel.key": "dim",
        "browsel.id": "bold blue",
        "browsel.pattern": "magenta",
        "browsel.url": "underline",
        "browsel.path": "dim",
        "browsel.match": "green",
        "browsel.nomatch": "yellow",
        "browsel.disabled": "dim strike",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing to an in-memory buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps tables stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=BROWSEL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Rendered text of a console built by :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
