"""Repositories encapsulating SQL for rules, browsers, and settings."""

from browsel.infrastructure.repositories.browsers import BrowserRepository
from browsel.infrastructure.repositories.rules import RuleRepository
from browsel.infrastructure.repositories.settings import SettingsRepository

__all__ = ["BrowserRepository", "RuleRepository", "SettingsRepository"]
