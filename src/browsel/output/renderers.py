"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO); the caller
extracts the text with ``get_output(console)``. Dispatch is by
``result.op`` in :func:`render_result`; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from browsel.domain.urls import truncate_url
from browsel.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from browsel.services.result import ServiceResult

Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* to text via Rich.

    Plain text (no ANSI) when Rich detects no terminal, which is the case
    inside CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: IDs for lists, a browser ID for routing."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)

    if result.op in ("route", "open"):
        browser = result.data.get("browser")
        return browser["id"] if browser else ""
    if result.op == "match":
        return "match" if result.data.get("matched") else "no match"
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "browsel.ok"), (f"  {result.op}", "browsel.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """One indented ``key: value`` line."""
    if key == "id" or key.endswith("_id"):
        style = "browsel.id"
    elif key == "pattern":
        style = "browsel.pattern"
    elif key == "url":
        style = "browsel.url"
    elif key.endswith("path"):
        style = "browsel.path"
    else:
        style = ""
    console.print(Text.assemble((f"  {key}: ", "browsel.key"), (_plain(value), style)))


def _plain(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _browser_label(data: dict[str, Any] | None) -> str:
    if not data:
        return "-"
    return f"{data['name']} ({data['id']})"


def _rule_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="browsel.id", justify="right", no_wrap=True)
    table.add_column("Pattern", style="browsel.pattern")
    table.add_column("Browser")
    table.add_column("Priority", justify="right")
    if verbose:
        table.add_column("Created", style="dim")
    for item in items:
        browser = item.get("browser_name")
        row = [
            str(item["id"]),
            item["pattern"],
            f"{browser} ({item['target']})" if browser else f"{item['target']} (missing)",
            str(item["priority"]),
        ]
        if verbose:
            row.append(str(item.get("created_at", "")))
        table.add_row(*row)
    return table


def _browser_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="browsel.id", no_wrap=True)
    table.add_column("Name")
    table.add_column("Executable", style="browsel.path")
    table.add_column("Private")
    if verbose:
        table.add_column("Profile Arg", style="dim")
    for item in items:
        name = f"  {item['name']}" if item.get("is_profile") else item["name"]
        if item.get("last_used"):
            name += " *"
        row: list[Any] = [
            item["id"],
            Text(name, style="" if item.get("enabled", True) else "browsel.disabled"),
            item["exe_path"],
            item.get("incognito_arg") or "-",
        ]
        if verbose:
            row.append(item.get("profile_arg") or "-")
        table.add_row(*row)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "browsel.error"), (f"  {result.op}", "browsel.op"), f": {msg}")
    )
    if verbose and err:
        _field(console, "code", err.code)
        for key, value in err.detail.items():
            _field(console, key, value)


# ── Rule renderers ────────────────────────────────────────────────────


def _render_rule(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("id", "pattern", "target", "browser_name", "priority"):
        if key in d:
            _field(console, key, d[key])
    if verbose and "created_at" in d:
        _field(console, "created_at", d["created_at"])


def _render_rule_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No rules. Add one with: browsel rule add PATTERN BROWSER_ID")
        return
    console.print(_rule_table(items, verbose=verbose))
    console.print(f"\n{result.data.get('count', len(items))} rules")


def _render_rule_swap(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    console.print(_rule_table(result.data.get("items", []), verbose=verbose))


def _render_match(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if d.get("matched"):
        verdict = ("MATCH", "browsel.match")
    else:
        verdict = ("NO MATCH", "browsel.nomatch")
    console.print(Text.assemble(verdict, (f"  {d['pattern']}", "browsel.pattern")))
    _field(console, "url", truncate_url(d["url"]))
    _field(console, "domain", d["domain"])
    _field(console, "path", d["path"])
    if verbose:
        _field(console, "valid", d["valid"])


# ── Browser renderers ─────────────────────────────────────────────────


def _render_browser(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    keys = ["id", "name", "exe_path", "incognito_arg", "enabled"]
    if d.get("is_profile"):
        keys[2:2] = ["parent_browser_id", "profile_arg"]
    if verbose:
        keys.append("icon_path")
    for key in keys:
        if key in d:
            _field(console, key, d[key])


def _render_browser_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No browsers. Register one with: browsel browser add ID NAME EXE")
        return
    console.print(_browser_table(items, verbose=verbose))
    console.print(f"\n{result.data.get('count', len(items))} browsers")


# ── Setting renderers ─────────────────────────────────────────────────


def _render_setting_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Key", style="browsel.key")
    table.add_column("Value")
    if verbose:
        table.add_column("Kind", style="dim")
    for item in result.data.get("items", []):
        row = [item["key"], _plain(item["value"])]
        if verbose:
            row.append(item["kind"])
        table.add_row(*row)
    console.print(table)


def _render_setting(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, result.data["key"], result.data["value"])


# ── Routing renderers ─────────────────────────────────────────────────


def _render_route(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if d.get("matched"):
        target = (_browser_label(d["browser"]), "browsel.match")
    else:
        target = ("no match", "browsel.nomatch")
    console.print(Text.assemble((truncate_url(d["url"]), "browsel.url"), " -> ", target))
    rule = d.get("rule")
    if rule:
        _field(console, "rule", f"#{rule['id']} {rule['pattern']} (priority {rule['priority']})")
    if d.get("source") == "default":
        _field(console, "source", "default browser")
    if verbose:
        _field(console, "domain", d["domain"])
        _field(console, "path", d["path"])


def _render_open(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    verb = "Opened" if d.get("launched") else "Would open"
    suffix = " (private)" if d.get("incognito") else ""
    console.print(
        Text.assemble(
            (f"{verb} ", "browsel.ok"),
            (truncate_url(d["url"]), "browsel.url"),
            f" in {_browser_label(d['browser'])}{suffix}",
        )
    )
    remembered = d.get("remembered")
    if remembered:
        _field(console, "remembered", f"#{remembered['id']} {remembered['pattern']}")
    if verbose or not d.get("launched"):
        _field(console, "command", " ".join(d.get("command", [])))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line plus every data key."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    # Rules
    "add_rule": _render_rule,
    "set_priority": _render_rule,
    "list_rules": _render_rule_list,
    "swap_priority": _render_rule_swap,
    "match": _render_match,
    # Browsers
    "add_browser": _render_browser,
    "add_profile": _render_browser,
    "enable_browser": _render_browser,
    "disable_browser": _render_browser,
    "list_browsers": _render_browser_list,
    # Settings
    "list_settings": _render_setting_list,
    "set_setting": _render_setting,
    # Routing
    "route": _render_route,
    "open": _render_open,
}
