"""``python -m browsel`` entry point."""

from browsel.cli import cli

cli()
