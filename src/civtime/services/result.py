"""ServiceResult and ServiceError — what every service call hands back.

INVARIANT: service methods return a ServiceResult and do not raise for
bad user input.  The CLI decides how to print it and which exit code
to use.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus a readable ``message``."""

    model_config = {"frozen": True}

    code: str  # e.g. "INVALID_INSTANT"
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one conversion operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"breakdown"``, ``"resolve"``, ``"zone"``, ``"now"``).
        data: JSON-ready payload on success.
        warnings: Non-fatal notes, such as an out-of-order era table.
        error: Set only when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        """Build an ``ok`` result carrying *data* and any *warnings*."""
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result; keyword arguments land in ``error.detail``."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
