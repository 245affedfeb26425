"""Output layer — turning ServiceResult into human, quiet, or JSON text.

Output may import from services (for types) but never from commands.
"""
