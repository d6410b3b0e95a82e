"""FastAPI integration for the JSON error responder."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response

from .http import write_error
from .sinks import ResponseRecorder
from .status_table import reason_phrase

LOGGER = logging.getLogger(__name__)


class HTTPError(Exception):
    """Raise from a route to answer with a standard JSON error body."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        # Unknown codes raise InvalidStatusCodeError here.
        message = reason_phrase(status_code)
        super().__init__(reason or message)
        self.status_code = status_code
        self.reason = reason

    def __reduce__(self) -> tuple[type[HTTPError], tuple[int, str]]:
        return type(self), (self.status_code, self.reason)


def error_response(status_code: int, reason: str) -> Response:
    """Return a FastAPI response carrying the JSON error for ``status_code``."""

    recorder = ResponseRecorder()
    write_error(recorder, status_code, reason)
    return recorder.to_response()


async def http_error_handler(request: Request, exc: HTTPError) -> Response:
    """Render an ``HTTPError`` raised while handling ``request``."""

    LOGGER.warning(
        "Request failed with %s: %s",
        exc.status_code,
        exc.reason,
        extra={
            "extra_payload": {
                "method": request.method,
                "path": request.url.path,
                "status_code": exc.status_code,
            }
        },
    )
    return error_response(exc.status_code, exc.reason)


def register_error_handlers(app: FastAPI) -> None:
    """Install the ``HTTPError`` handler on ``app``."""

    app.add_exception_handler(HTTPError, http_error_handler)  # type: ignore[arg-type]


__all__: list[str] = [
    "HTTPError",
    "error_response",
    "http_error_handler",
    "register_error_handlers",
]
