"""Service layer — operations behind every CLI command.

All public methods return :class:`~browsel.services.result.ServiceResult`.
"""
