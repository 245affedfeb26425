"""RoutingService — from a raw URL to a running browser.

Pipeline: NORMALIZE → RESOLVE → PICK BROWSER → (REMEMBER) → LAUNCH

A matching rule whose browser is missing or disabled does not fall
through to lower-priority rules: the first match decides, and a dead
target is reported as "no usable match".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from browsel.config.logging import get_logger
from browsel.config.models import LaunchConfig
from browsel.domain.models import Rule, TextSetting
from browsel.domain.patterns import domain_to_pattern, is_valid_pattern
from browsel.domain.resolver import resolve_from
from browsel.domain.types import TextKey, ToggleKey
from browsel.domain.urls import NormalizedUrl, decompose, is_valid_url, normalize_url
from browsel.infrastructure.launcher import LaunchError, build_command, launch
from browsel.services.base import BaseService
from browsel.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from browsel.domain.models import Browser
    from browsel.infrastructure.store import Store

logger = get_logger(__name__)


@dataclass
class _Route:
    """Outcome of resolving one URL."""

    url: str
    parts: NormalizedUrl
    rule: Rule | None = None
    browser: Browser | None = None
    source: str | None = None  # "rule" | "default"
    warnings: list[str] = field(default_factory=list)


class RoutingService(BaseService):
    """Resolve URLs against the stored rules and open them."""

    def __init__(self, store: Store, launch_config: LaunchConfig | None = None) -> None:
        super().__init__(store)
        self._launch = launch_config or LaunchConfig()

    def _usable(self, browser_id: str, route: _Route, why: str) -> Browser | None:
        browser = self._store.browsers.get(browser_id)
        if browser is None:
            route.warnings.append(f"{why} targets unknown browser {browser_id}")
            return None
        if not browser.enabled:
            route.warnings.append(f"{why} targets disabled browser {browser_id}")
            return None
        return browser

    def _route(self, url: str) -> _Route:
        target = url if is_valid_url(url) else normalize_url(url)
        route = _Route(url=target, parts=decompose(target))

        rule = resolve_from(self._store.rules, target)
        if rule is not None:
            route.rule = rule
            route.browser = self._usable(rule.target, route, f"Rule {rule.id} ({rule.pattern})")
            if route.browser is not None:
                route.source = "rule"

        default = self._launch.default_browser
        if route.browser is None and default:
            route.browser = self._usable(default, route, "Default browser setting")
            if route.browser is not None:
                route.source = "default"

        logger.debug(
            "url_routed",
            url=target,
            domain=route.parts.domain,
            rule_id=rule.id if rule else None,
            source=route.source,
        )
        return route

    def _remember(self, pattern: str, browser_id: str) -> dict[str, Any]:
        """Save *pattern* -> *browser_id*, keeping an existing rule's priority."""
        existing = self._store.rules.find_by_pattern(pattern)
        if existing is not None:
            rule = existing.model_copy(update={"target": browser_id})
        else:
            rule = Rule(pattern=pattern, target=browser_id)
        saved = self._store.rules.save(rule)
        logger.info("rule_remembered", rule_id=saved.id, pattern=pattern, target=browser_id)
        return self._rule_data(saved)

    def _route_data(self, route: _Route) -> dict[str, Any]:
        return {
            "url": route.url,
            "domain": route.parts.domain,
            "path": route.parts.path,
            "matched": route.browser is not None,
            "source": route.source,
            "rule": self._rule_data(route.rule) if route.rule else None,
            "browser": self._browser_data(route.browser) if route.browser else None,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def route(self, url: str) -> ServiceResult:
        """Report which browser *url* would open in. "No match" is not an error."""
        route = self._route(url)
        return ServiceResult(
            ok=True, op="route", data=self._route_data(route), warnings=route.warnings
        )

    def open(
        self,
        url: str,
        *,
        browser_id: str | None = None,
        incognito: bool = False,
        remember: bool = False,
        pattern: str | None = None,
        dry_run: bool = False,
    ) -> ServiceResult:
        """Open *url* in the routed browser, or in *browser_id* when given.

        Args:
            url: Raw URL; scheme-less input gets ``https://``.
            browser_id: Explicit choice, bypassing rule resolution.
            incognito: Open a private window when the browser supports it.
            remember: Store a rule sending *pattern* (default: the URL's
                domain) to the chosen browser.
            pattern: Pattern to remember; implies nothing without *remember*.
            dry_run: Resolve and build the command without launching.
        """
        op = "open"
        route = self._route(url)
        warnings = list(route.warnings)

        if browser_id is not None:
            browser = self._store.browsers.get(browser_id)
            if browser is None:
                return ServiceResult.failure(
                    op,
                    ErrorCode.NOT_FOUND,
                    f"No browser with ID: {browser_id}",
                    browser_id=browser_id,
                )
            source = "manual"
        elif route.browser is not None:
            browser = route.browser
            source = route.source
        else:
            return ServiceResult.failure(
                op,
                ErrorCode.NO_MATCH,
                f"No rule matches {route.parts.domain or route.url}; choose one with --browser",
                url=route.url,
                domain=route.parts.domain,
            )

        if incognito and not self._store.settings.get_toggle(ToggleKey.SHOW_INCOGNITO, True):
            warnings.append("Private windows are disabled (show_incognito=false)")
            incognito = False
        elif incognito and not browser.incognito_arg:
            warnings.append(f"{browser.name} has no private-window flag")

        data = self._route_data(route)
        data.update(
            browser=self._browser_data(browser),
            source=source,
            incognito=incognito,
            launched=False,
        )

        if remember:
            candidate = (pattern or domain_to_pattern(route.parts.domain)).strip()
            if not is_valid_pattern(candidate):
                warnings.append(f"Not remembering invalid pattern: {candidate!r}")
            elif dry_run:
                warnings.append(f"Dry run: rule {candidate!r} not saved")
            else:
                data["remembered"] = self._remember(candidate, browser.id)

        if dry_run:
            data["command"] = build_command(browser, route.url, incognito=incognito)
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

        try:
            data["command"] = launch(
                browser, route.url, incognito=incognito, detach=self._launch.detach
            )
        except LaunchError as exc:
            logger.warning("launch_failed", browser_id=browser.id, error=str(exc))
            return ServiceResult.failure(
                op, ErrorCode.LAUNCH_FAILED, str(exc), browser_id=browser.id
            )

        data["launched"] = True
        self._store.settings.save(TextSetting(key=TextKey.LAST_BROWSER.value, value=browser.id))
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
