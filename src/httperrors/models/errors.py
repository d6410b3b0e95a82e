"""Error response model emitted by the responder."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["ErrorResponse"]


class ErrorResponse(BaseModel):
    """Standardised JSON error payload.

    Field order is the serialised key order: ``code``, ``message``, ``reason``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: int
    message: str
    reason: str
