"""Output mode selection for ServiceResult.

The CLI renders results for humans (Rich tables and fields), for scripts
(``--quiet``: IDs or a status word), or for machines (``--json``: the
full ServiceResult, warnings included).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from browsel.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* for display according to *settings*.

    JSON wins over quiet; quiet wins over the default Rich rendering.
    """
    from browsel.output.renderers import render_quiet, render_result

    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
