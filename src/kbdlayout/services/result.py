"""ServiceResult and ServiceError — the service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and any library caller consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


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
        op: Name of the operation (e.g. ``"compute_layout"``).
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
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
