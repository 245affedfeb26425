"""Command group: manage URL rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from browsel.commands._base import BrowselGroup
from browsel.services.rules import RuleService

if TYPE_CHECKING:
    from browsel.commands._context import AppContext

_RULE_EXAMPLES = """\
  browsel rule add "*.google.com" chrome
  browsel rule add "github.com/work-org/**" work --priority 10
  browsel rule list
  browsel rule priority 3 5
  browsel rule swap 3 7
  browsel rule remove 3"""


@click.group(cls=BrowselGroup, examples=_RULE_EXAMPLES)
def rule() -> None:
    """Add, list, reorder, and remove URL rules."""


@rule.command(
    examples="""\
  browsel rule add "*.google.com" chrome
  browsel rule add "*/login" firefox-private --priority 100
  browsel rule add example.com edge"""
)
@click.argument("pattern")
@click.argument("browser_id")
@click.option("-p", "--priority", default=0, type=int, help="Higher wins (default 0).")
@click.pass_obj
def add(app: AppContext, pattern: str, browser_id: str, priority: int) -> None:
    """Send URLs matching PATTERN to BROWSER_ID."""
    app.emit(RuleService(app.store).add_rule(pattern, browser_id, priority=priority))


@rule.command(
    name="list",
    examples="""\
  browsel rule list
  browsel -v rule list
  browsel -q rule list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List rules in the order they are tried."""
    app.emit(RuleService(app.store).list_rules())


@rule.command(examples="  browsel rule remove 3")
@click.argument("rule_id", type=int)
@click.pass_obj
def remove(app: AppContext, rule_id: int) -> None:
    """Delete a rule by ID."""
    app.emit(RuleService(app.store).remove_rule(rule_id))


@rule.command(
    examples="""\
  browsel rule clear chrome
  browsel rule clear old-browser --yes""",
)
@click.argument("browser_id")
@click.confirmation_option(prompt="Delete every rule targeting this browser?")
@click.pass_obj
def clear(app: AppContext, browser_id: str) -> None:
    """Delete all rules that send URLs to BROWSER_ID."""
    app.emit(RuleService(app.store).remove_rules_for(browser_id))


@rule.command(
    examples="""\
  browsel rule priority 3 10
  browsel rule priority 3 -- -1"""
)
@click.argument("rule_id", type=int)
@click.argument("priority", type=int)
@click.pass_obj
def priority(app: AppContext, rule_id: int, priority: int) -> None:
    """Set a rule's priority."""
    app.emit(RuleService(app.store).set_priority(rule_id, priority))


@rule.command(examples="  browsel rule swap 3 7")
@click.argument("first_id", type=int)
@click.argument("second_id", type=int)
@click.pass_obj
def swap(app: AppContext, first_id: int, second_id: int) -> None:
    """Exchange the priorities of two rules."""
    app.emit(RuleService(app.store).swap_priority(first_id, second_id))
