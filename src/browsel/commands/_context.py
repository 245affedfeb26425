"""AppContext — shared Click context for all commands.

Created once by the root group and handed to subcommands through
``@click.pass_obj``. Opens the store lazily and centralizes result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from browsel.config.logging import configure_logging
from browsel.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from browsel.config.settings import BrowselSettings
    from browsel.infrastructure.store import Store
    from browsel.services.result import ServiceResult


class AppContext:
    """State shared across the command hierarchy.

    The store is opened on first access so ``--help``, ``--version`` and
    ``--examples`` never touch the database.
    """

    def __init__(self, settings: BrowselSettings) -> None:
        self.settings = settings
        self._store: Store | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> Store:
        if self._store is None:
            from browsel.infrastructure.store import Store

            self._store = Store.from_settings(self.settings)
        return self._store

    def close(self) -> None:
        """Dispose of the store's engine if it was opened."""
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and apply exit semantics.

        * Success: output to stdout. Warnings go to stderr unless ``--json``
          is set, where they are already part of the payload.
        * Failure: output to stderr, exit code 1.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        if output:
            click.echo(output)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
