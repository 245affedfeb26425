"""Spawning browser processes.

The launched browser must outlive browsel, so the child is started
detached (own session / process group) with its stdio discarded.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from browsel.domain.models import Browser

logger = logging.getLogger(__name__)


class LaunchError(RuntimeError):
    """The browser executable could not be started."""


def build_command(browser: Browser, url: str, *, incognito: bool = False) -> list[str]:
    """Argument vector opening *url* in *browser*.

    Order: executable, profile flag, private-window flag, URL.
    """
    command = [str(browser.exe_path)]
    if browser.profile_arg and browser.profile_arg.strip():
        command.append(browser.profile_arg)
    if incognito and browser.incognito_arg:
        command.append(browser.incognito_arg)
    command.append(url)
    return command


def _detach_kwargs() -> dict[str, Any]:
    if sys.platform == "win32":
        flags = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
        return {"creationflags": flags}
    return {"start_new_session": True}


def launch(
    browser: Browser,
    url: str,
    *,
    incognito: bool = False,
    detach: bool = True,
) -> list[str]:
    """Start *browser* on *url* and return the command that was run.

    Raises:
        LaunchError: If the process could not be spawned.
    """
    command = build_command(browser, url, incognito=incognito)
    kwargs: dict[str, Any] = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
    }
    if detach:
        kwargs.update(_detach_kwargs())
    try:
        subprocess.Popen(command, **kwargs)  # noqa: S603 - argv list, no shell
    except OSError as exc:
        msg = f"Failed to launch {browser.name}: {exc}"
        raise LaunchError(msg) from exc
    logger.debug("Launched %s: %s", browser.id, command)
    return command
