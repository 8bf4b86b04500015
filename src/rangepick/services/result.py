"""ServiceResult and ServiceError — the contract every service call returns.

INVARIANT: Constraint violations are data, not failures.  A selection
that breaks a constraint comes back with ``ok=True`` and the violations
under ``data["errors"]``; ``ok=False`` is reserved for inputs the engine
cannot work with at all (unknown timezone, unknown preset, disabled
picker).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation could not run."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False only when the operation could not run.
        op: Operation name (e.g. ``"select_date"``).
        data: Operation payload; JSON-serializable.
        warnings: Human-readable notes, including constraint violations.
        error: Populated when ``ok`` is False.
        meta: Optional extras (reference instants, timezone used).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
