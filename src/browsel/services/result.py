"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: service methods report user-facing failures as
``ServiceResult(ok=False)``; they do not raise for bad input.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Stable machine-readable failure codes (surfaced in ``--json``)."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_PATTERN = "INVALID_PATTERN"
    INVALID_VALUE = "INVALID_VALUE"
    UNKNOWN_SETTING = "UNKNOWN_SETTING"
    NO_MATCH = "NO_MATCH"
    LAUNCH_FAILED = "LAUNCH_FAILED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_rule"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Shorthand for a failed result carrying a :class:`ServiceError`."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code.value, message=message, detail=detail),
        )
