"""Domain layer — URL decomposition, pattern matching, rule resolution, models.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
