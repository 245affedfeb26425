"""Plain data records read by the engine: rules, browsers, and settings.

All models are frozen. The engine only ever reads them; creating,
editing, and deleting them belongs to the store.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Rule(BaseModel):
    """Association of a wildcard pattern with a target browser.

    Attributes:
        id: Store-assigned ordering key (0 until persisted).
        pattern: Wildcard pattern, see :mod:`browsel.domain.patterns`.
        target: Browser ID to launch on match.
        priority: Higher wins; equal priorities fall back to lower ``id``.
        created_at: When the rule was created.
    """

    model_config = {"frozen": True}

    id: int = 0
    pattern: str
    target: str
    priority: int = 0
    created_at: datetime = Field(default_factory=_utcnow)

    def with_id(self, rule_id: int) -> Rule:
        return self.model_copy(update={"id": rule_id})

    def with_priority(self, priority: int) -> Rule:
        return self.model_copy(update={"priority": priority})


def detect_incognito_arg(browser_name: str) -> str:
    """Private-window flag for a browser, inferred from its display name."""
    lower = browser_name.lower()
    if "firefox" in lower:
        return "-private-window"
    if "opera" in lower:
        return "--private"
    return "--incognito"  # Chromium family


class Browser(BaseModel):
    """A launchable browser, or one profile of a browser."""

    model_config = {"frozen": True}

    id: str
    name: str
    exe_path: Path
    icon_path: Path | None = None
    profile_arg: str | None = None
    incognito_arg: str | None = None
    is_profile: bool = False
    parent_browser_id: str | None = None
    enabled: bool = True

    @classmethod
    def create(cls, browser_id: str, name: str, exe_path: Path | str) -> Browser:
        """Build a top-level browser with its private-window flag inferred."""
        return cls(
            id=browser_id,
            name=name,
            exe_path=Path(exe_path),
            incognito_arg=detect_incognito_arg(name),
        )

    def with_profile(self, profile_id: str, profile_name: str, profile_arg: str) -> Browser:
        """Derive a profile entry sharing this browser's executable."""
        return Browser(
            id=profile_id,
            name=profile_name,
            exe_path=self.exe_path,
            icon_path=self.icon_path,
            profile_arg=profile_arg,
            incognito_arg=self.incognito_arg,
            is_profile=True,
            parent_browser_id=self.id,
            enabled=True,
        )

    def with_enabled(self, enabled: bool) -> Browser:
        return self.model_copy(update={"enabled": enabled})

    @property
    def display_name(self) -> str:
        """Name as listed to the user; profiles are indented under their browser."""
        return f"  {self.name}" if self.is_profile else self.name


class ToggleSetting(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["toggle"] = "toggle"
    key: str
    value: bool


class TextSetting(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["text"] = "text"
    key: str
    value: str


Setting = Annotated[ToggleSetting | TextSetting, Field(discriminator="kind")]
