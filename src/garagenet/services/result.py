"""ServiceResult and ServiceError: the contract every service returns.

INVARIANT: Service operations never raise for expected failures
(validation, network).  They return ``ok=False`` with a structured error,
and the CLI decides how to surface it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes shared by forms and dialogs.
VALIDATION_FAILED = "VALIDATION_FAILED"
CREATE_FAILED = "CREATE_FAILED"
SUBMIT_IN_PROGRESS = "SUBMIT_IN_PROGRESS"
DIALOG_CLOSED = "DIALOG_CLOSED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_garage"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (auth mode, timing, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def field_errors(self) -> dict[str, str]:
        """Per-field messages of a validation failure, keyed by dotted path."""
        if self.error is None:
            return {}
        return dict(self.error.detail.get("errors", {}))


def validation_failure(op: str, errors: dict[str, str]) -> ServiceResult:
    """Build the result for a candidate that failed validation."""
    count = len(errors)
    noun = "field" if count == 1 else "fields"
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=VALIDATION_FAILED,
            message=f"{count} {noun} failed validation",
            detail={"errors": errors},
        ),
    )
