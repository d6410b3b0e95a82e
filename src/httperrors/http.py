"""JSON error responder shared by httperrors integrations."""

from __future__ import annotations

import logging
from typing import Callable, Final

from .models.errors import ErrorResponse
from .sinks import ResponseSink
from .status_table import reason_phrase

LOGGER = logging.getLogger(__name__)

JSON_CONTENT_TYPE: Final[str] = "application/json; charset=UTF-8"
PLAIN_TEXT_CONTENT_TYPE: Final[str] = "text/plain; charset=utf-8"

Serializer = Callable[[ErrorResponse], bytes]


def build_error_payload(status_code: int, reason: str) -> ErrorResponse:
    """Construct the error payload for a recognised ``status_code``."""

    return ErrorResponse(code=status_code, message=reason_phrase(status_code), reason=reason)


def encode_error_response(payload: ErrorResponse) -> bytes:
    """Serialise ``payload`` as compact UTF-8 JSON."""

    return payload.model_dump_json().encode("utf-8")


def _write_body(sink: ResponseSink, body: bytes) -> None:
    try:
        sink.write(body)
    except OSError as exc:
        LOGGER.debug("Discarding response body write failure: %s", exc)


def write_plain_error(sink: ResponseSink, status_code: int, reason: str) -> None:
    """Write ``reason`` as a plain-text error response."""

    headers = sink.headers
    if "content-length" in headers:
        del headers["content-length"]
    headers["content-type"] = PLAIN_TEXT_CONTENT_TYPE
    headers["x-content-type-options"] = "nosniff"
    sink.write_header(status_code)
    _write_body(sink, f"{reason}\n".encode("utf-8"))


def write_error(
    sink: ResponseSink,
    status_code: int,
    reason: str,
    *,
    serializer: Serializer = encode_error_response,
) -> None:
    """Write a JSON error response for ``status_code`` to ``sink``.

    Given ``404`` and ``"Could not find user"`` the body is::

        {"code":404,"message":"Not Found","reason":"Could not find user"}

    ``status_code`` must be present in the status table; anything else raises
    ``InvalidStatusCodeError`` before the sink is touched. When ``serializer``
    fails the reason is sent as plain text with the same status instead.
    """

    payload = build_error_payload(status_code, reason)

    try:
        body = serializer(payload)
    except Exception:
        LOGGER.warning(
            "Failed to serialise error response; falling back to plain text",
            exc_info=True,
            extra={"extra_payload": {"status_code": status_code}},
        )
        write_plain_error(sink, status_code, reason)
        return

    sink.headers["content-type"] = JSON_CONTENT_TYPE
    sink.write_header(status_code)
    _write_body(sink, body)


__all__: list[str] = [
    "JSON_CONTENT_TYPE",
    "PLAIN_TEXT_CONTENT_TYPE",
    "Serializer",
    "build_error_payload",
    "encode_error_response",
    "write_error",
    "write_plain_error",
]
