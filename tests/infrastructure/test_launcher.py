"""Tests for browser command building and launching."""

from __future__ import annotations

import subprocess
import sys

import pytest

from browsel.domain.models import Browser
from browsel.infrastructure.launcher import LaunchError, build_command, launch
from tests.conftest import PopenRecorder

FIREFOX = Browser.create("firefox", "Firefox", "/usr/bin/firefox")
CHROME_WORK = Browser.create("chrome", "Chrome", "/usr/bin/chrome").with_profile(
    "chrome-work", "Chrome (Work)", "--profile-directory=Work"
)


class TestBuildCommand:
    def test_plain(self) -> None:
        assert build_command(FIREFOX, "https://x.com") == ["/usr/bin/firefox", "https://x.com"]

    def test_incognito(self) -> None:
        command = build_command(FIREFOX, "https://x.com", incognito=True)
        assert command == ["/usr/bin/firefox", "-private-window", "https://x.com"]

    def test_profile_then_incognito_then_url(self) -> None:
        command = build_command(CHROME_WORK, "https://x.com", incognito=True)
        assert command == [
            "/usr/bin/chrome",
            "--profile-directory=Work",
            "--incognito",
            "https://x.com",
        ]

    def test_blank_profile_arg_skipped(self) -> None:
        browser = FIREFOX.model_copy(update={"profile_arg": "  "})
        assert build_command(browser, "https://x.com") == ["/usr/bin/firefox", "https://x.com"]

    def test_incognito_without_flag(self) -> None:
        browser = FIREFOX.model_copy(update={"incognito_arg": None})
        command = build_command(browser, "https://x.com", incognito=True)
        assert command == ["/usr/bin/firefox", "https://x.com"]


class TestLaunch:
    def test_spawns_detached(self, popen: PopenRecorder) -> None:
        command = launch(FIREFOX, "https://x.com")
        assert command == ["/usr/bin/firefox", "https://x.com"]
        (called, kwargs), = popen.calls
        assert called == command
        assert kwargs["stdout"] is subprocess.DEVNULL
        if sys.platform == "win32":
            assert "creationflags" in kwargs
        else:
            assert kwargs["start_new_session"] is True

    def test_attached(self, popen: PopenRecorder) -> None:
        launch(FIREFOX, "https://x.com", detach=False)
        (_, kwargs), = popen.calls
        assert "start_new_session" not in kwargs
        assert "creationflags" not in kwargs

    def test_os_error_wrapped(self, popen: PopenRecorder) -> None:
        popen.error = FileNotFoundError(2, "No such file", "/usr/bin/firefox")
        with pytest.raises(LaunchError, match="Failed to launch Firefox"):
            launch(FIREFOX, "https://x.com")
