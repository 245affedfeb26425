"""Commands: open a URL in its browser, or show where it would go."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from browsel.commands._base import BrowselCommand

if TYPE_CHECKING:
    from browsel.commands._context import AppContext


@click.command(
    "open",
    cls=BrowselCommand,
    examples="""\
  browsel open https://github.com/org/repo
  browsel open docs.python.org --dry-run
  browsel open https://mail.example.com --browser firefox --incognito
  browsel open https://jira.corp.example --browser work --remember --pattern "*.corp.example"
  browsel open https://jira.corp.example/browse/X-1 --browser work --remember""",
)
@click.argument("url")
@click.option("-b", "--browser", "browser_id", default=None, help="Open in this browser ID.")
@click.option("-i", "--incognito", is_flag=True, help="Open a private window.")
@click.option("--remember", is_flag=True, help="Save a rule for the chosen browser.")
@click.option(
    "--pattern",
    default=None,
    help="Pattern to remember (default: the URL's domain).",
)
@click.option("-n", "--dry-run", is_flag=True, help="Resolve and print the command only.")
@click.pass_obj
def open_cmd(
    app: AppContext,
    url: str,
    browser_id: str | None,
    incognito: bool,
    remember: bool,
    pattern: str | None,
    dry_run: bool,
) -> None:
    """Open URL in the browser its rules select."""
    from browsel.services.routing import RoutingService

    if pattern is not None and not remember:
        raise click.UsageError("--pattern only applies together with --remember")

    svc = RoutingService(app.store, app.settings.launch)
    app.emit(
        svc.open(
            url,
            browser_id=browser_id,
            incognito=incognito,
            remember=remember,
            pattern=pattern,
            dry_run=dry_run,
        )
    )


@click.command(
    cls=BrowselCommand,
    examples="""\
  browsel route https://github.com/org/repo
  browsel route mail.google.com
  browsel -q route https://example.com
  browsel --json route https://example.com/path""",
)
@click.argument("url")
@click.pass_obj
def route(app: AppContext, url: str) -> None:
    """Show which rule and browser URL resolves to, without opening it."""
    from browsel.services.routing import RoutingService

    app.emit(RoutingService(app.store, app.settings.launch).route(url))
