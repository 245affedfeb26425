"""Command: try a pattern against a URL without storing anything."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from browsel.commands._base import BrowselCommand

if TYPE_CHECKING:
    from browsel.commands._context import AppContext


@click.command(
    cls=BrowselCommand,
    examples="""\
  browsel match "*.google.com" https://mail.google.com
  browsel match google.com https://mail.google.com
  browsel match "github.com/org/**" github.com/org/repo/issues
  browsel --json match "*" https://example.com""",
)
@click.argument("pattern")
@click.argument("url")
@click.pass_obj
def match(app: AppContext, pattern: str, url: str) -> None:
    """Check whether PATTERN matches URL."""
    from browsel.services.rules import RuleService

    app.emit(RuleService(app.store).test_pattern(pattern, url))
