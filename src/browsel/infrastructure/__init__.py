"""Infrastructure layer — SQLite rule store and browser process launching.

This layer depends on stdlib, SQLAlchemy, and the domain models it
persists. It must never import from services, commands, or output.
"""
