"""Command group: register browsers and profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from browsel.commands._base import BrowselGroup
from browsel.services.browsers import BrowserService

if TYPE_CHECKING:
    from browsel.commands._context import AppContext

_BROWSER_EXAMPLES = """\
  browsel browser add firefox Firefox /usr/bin/firefox
  browsel browser add chrome "Google Chrome" /usr/bin/google-chrome
  browsel browser profile chrome work "Chrome (Work)" -- "--profile-directory=Profile 1"
  browsel browser list
  browsel browser disable chrome
  browsel browser remove chrome"""


@click.group(cls=BrowselGroup, examples=_BROWSER_EXAMPLES)
def browser() -> None:
    """Register the browsers URLs can be sent to."""


@browser.command(
    examples="""\
  browsel browser add firefox Firefox /usr/bin/firefox
  browsel browser add edge "Microsoft Edge" "C:/Program Files/Edge/msedge.exe"
  browsel browser add brave Brave /usr/bin/brave-browser --incognito-arg=--incognito"""
)
@click.argument("browser_id")
@click.argument("name")
@click.argument("exe_path", type=click.Path(dir_okay=False))
@click.option("--icon", "icon_path", default=None, type=click.Path(), help="Icon file.")
@click.option("--profile-arg", default=None, help="Extra argument passed before the URL.")
@click.option(
    "--incognito-arg",
    default=None,
    help="Private-window flag (inferred from NAME when omitted).",
)
@click.pass_obj
def add(
    app: AppContext,
    browser_id: str,
    name: str,
    exe_path: str,
    icon_path: str | None,
    profile_arg: str | None,
    incognito_arg: str | None,
) -> None:
    """Register (or replace) a browser executable."""
    svc = BrowserService(app.store)
    app.emit(
        svc.add_browser(
            browser_id,
            name,
            exe_path,
            icon_path=icon_path,
            profile_arg=profile_arg,
            incognito_arg=incognito_arg,
        )
    )


@browser.command(
    examples="""\
  browsel browser profile chrome chrome-work "Chrome (Work)" -- "--profile-directory=Profile 1"
  browsel --json browser profile chrome home "Home" -- --profile-directory=Default"""
)
@click.argument("parent_id")
@click.argument("profile_id")
@click.argument("name")
@click.argument("profile_arg")
@click.pass_obj
def profile(app: AppContext, parent_id: str, profile_id: str, name: str, profile_arg: str) -> None:
    """Add a profile of PARENT_ID launched with PROFILE_ARG."""
    app.emit(BrowserService(app.store).add_profile(parent_id, profile_id, name, profile_arg))


@browser.command(
    name="list",
    examples="""\
  browsel browser list
  browsel browser list --enabled
  browsel -q browser list""",
)
@click.option("--enabled", "enabled_only", is_flag=True, help="Hide disabled browsers.")
@click.pass_obj
def list_cmd(app: AppContext, enabled_only: bool) -> None:
    """List registered browsers and profiles."""
    app.emit(BrowserService(app.store).list_browsers(enabled_only=enabled_only))


@browser.command(examples="  browsel browser remove chrome")
@click.argument("browser_id")
@click.confirmation_option(prompt="Remove the browser and every rule targeting it?")
@click.pass_obj
def remove(app: AppContext, browser_id: str) -> None:
    """Remove a browser along with its rules."""
    app.emit(BrowserService(app.store).remove_browser(browser_id))


@browser.command(examples="  browsel browser clear --yes")
@click.confirmation_option(prompt="Forget every registered browser? Rules are kept.")
@click.pass_obj
def clear(app: AppContext) -> None:
    """Remove all browsers and profiles, keeping rules for re-registration."""
    app.emit(BrowserService(app.store).clear_browsers())


@browser.command(examples="  browsel browser enable chrome")
@click.argument("browser_id")
@click.pass_obj
def enable(app: AppContext, browser_id: str) -> None:
    """Make a browser available to rules again."""
    app.emit(BrowserService(app.store).set_enabled(browser_id, True))


@browser.command(examples="  browsel browser disable chrome")
@click.argument("browser_id")
@click.pass_obj
def disable(app: AppContext, browser_id: str) -> None:
    """Stop routing to a browser without deleting its rules."""
    app.emit(BrowserService(app.store).set_enabled(browser_id, False))
