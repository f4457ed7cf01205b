"""Service results: what interfaces receive from PassphraseService.

Engine exceptions stop at the service layer. Interfaces only ever see a
:class:`ServiceResult`, whose ``error`` carries the exception's stable code.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from xkpass.domain.errors import PassphraseError

Op = Literal["generate", "list_presets"]


class ServiceError(BaseModel):
    """Code, message and detail of a failed operation."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: PassphraseError) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=exc.detail)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: ``"generate"`` or ``"list_presets"``.
        data: Passwords and their resolved configuration, or the preset table.
        warnings: Weak configuration or ignored options. Never fatal.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: Op
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
