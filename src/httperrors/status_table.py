"""Canonical messages for the status codes the responder accepts."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from fastapi import status

from .errors import InvalidStatusCodeError

# Starlette renamed the 413 and 422 constants; fall back to the literal codes
# when only one spelling is available.
HTTP_STATUS_ENTITY_TOO_LARGE: Final[int] = getattr(status, "HTTP_413_CONTENT_TOO_LARGE", 413)
HTTP_STATUS_UNPROCESSABLE: Final[int] = getattr(status, "HTTP_422_UNPROCESSABLE_CONTENT", 422)

STATUS_MESSAGES: Final[Mapping[int, str]] = MappingProxyType(
    {
        status.HTTP_400_BAD_REQUEST: "Bad Request",
        status.HTTP_401_UNAUTHORIZED: "Unauthorized",
        status.HTTP_403_FORBIDDEN: "Forbidden",
        status.HTTP_404_NOT_FOUND: "Not Found",
        status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
        HTTP_STATUS_ENTITY_TOO_LARGE: "Entity Too Large",
        HTTP_STATUS_UNPROCESSABLE: "Unprocessable Entity",
        status.HTTP_424_FAILED_DEPENDENCY: "Failed Dependency",
        status.HTTP_429_TOO_MANY_REQUESTS: "Too Many Requests",
        status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
        status.HTTP_502_BAD_GATEWAY: "Bad Gateway",
        status.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
    }
)


def is_recognized(status_code: int) -> bool:
    """Return ``True`` when ``status_code`` has a canonical message."""

    try:
        return status_code in STATUS_MESSAGES
    except TypeError:
        return False


def reason_phrase(status_code: int) -> str:
    """Return the canonical message for ``status_code``.

    Raises ``InvalidStatusCodeError`` for codes outside the table.
    """

    try:
        return STATUS_MESSAGES[status_code]
    except (KeyError, TypeError):
        raise InvalidStatusCodeError(status_code) from None


__all__: list[str] = [
    "HTTP_STATUS_ENTITY_TOO_LARGE",
    "HTTP_STATUS_UNPROCESSABLE",
    "STATUS_MESSAGES",
    "is_recognized",
    "reason_phrase",
]
