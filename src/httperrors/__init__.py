"""Standard JSON error bodies for HTTP services."""

from __future__ import annotations

from .errors import ErrorList, InvalidStatusCodeError
from .handlers import HTTPError, error_response, register_error_handlers
from .http import encode_error_response, write_error, write_plain_error
from .models import ErrorResponse
from .sinks import ResponseRecorder, ResponseSink
from .status_table import STATUS_MESSAGES, is_recognized, reason_phrase

__version__ = "1.0.0"

__all__ = [
    "ErrorList",
    "ErrorResponse",
    "HTTPError",
    "InvalidStatusCodeError",
    "ResponseRecorder",
    "ResponseSink",
    "STATUS_MESSAGES",
    "encode_error_response",
    "error_response",
    "is_recognized",
    "reason_phrase",
    "register_error_handlers",
    "write_error",
    "write_plain_error",
]
