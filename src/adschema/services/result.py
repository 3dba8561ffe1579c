"""Result envelope returned by every :class:`SchemaService` operation.

Listings, resolutions, validations and audits all come back as a
ServiceResult; the CLI renders it and other callers read ``ok``,
``data`` and ``error`` directly. Submission problems are a failed result
with code ``VALIDATION_FAILED``, never an exception.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus structured ``detail``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"list_templates"``, ``"resolve"``,
            ``"validate"`` or ``"check"``); renderers dispatch on it.
        data: Operation-specific payload on success.
        warnings: Non-fatal notes such as ignored submission keys.
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
        cls, op: str, data: dict[str, Any], *, warnings: Iterable[str] = ()
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=list(warnings))

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: Iterable[str] = (),
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error, warnings=list(warnings))
