"""Command group: persisted preferences."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from browsel.commands._base import BrowselGroup
from browsel.services.settings import SettingsService

if TYPE_CHECKING:
    from browsel.commands._context import AppContext


@click.group(
    cls=BrowselGroup,
    examples="""\
  browsel setting list
  browsel setting set show_incognito false
  browsel setting set dark_theme on""",
)
def setting() -> None:
    """Show and change stored preferences."""


@setting.command(name="list", examples="  browsel setting list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every stored setting."""
    app.emit(SettingsService(app.store).list_settings())


@setting.command(
    name="set",
    examples="""\
  browsel setting set advanced_mode true
  browsel setting set show_incognito off""",
)
@click.argument("key")
@click.argument("value")
@click.pass_obj
def set_cmd(app: AppContext, key: str, value: str) -> None:
    """Set KEY to VALUE (toggles accept true/false, yes/no, on/off, 1/0)."""
    app.emit(SettingsService(app.store).set_setting(key, value))
