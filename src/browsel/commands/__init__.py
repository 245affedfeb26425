"""Subcommand modules for browsel.

:func:`register_commands` imports them on demand so ``browsel --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every command group and standalone command to *cli*."""
    # --- Groups ---
    from browsel.commands.browser import browser
    from browsel.commands.rule import rule
    from browsel.commands.setting import setting

    cli.add_command(rule)
    cli.add_command(browser)
    cli.add_command(setting)

    # --- Standalone commands ---
    from browsel.commands.match import match
    from browsel.commands.open_cmd import open_cmd, route

    cli.add_command(open_cmd)
    cli.add_command(route)
    cli.add_command(match)
