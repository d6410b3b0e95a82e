"""Response sinks the error responder writes to."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Protocol, runtime_checkable

from fastapi import Response, status
from starlette.datastructures import MutableHeaders

LOGGER = logging.getLogger(__name__)

__all__ = ["ResponseRecorder", "ResponseSink"]


@runtime_checkable
class ResponseSink(Protocol):
    """Writable HTTP response target.

    Callers mutate ``headers`` first, then send the status line with
    ``write_header`` and finally the body with ``write``.
    """

    @property
    def headers(self) -> MutableMapping[str, str]: ...

    def write_header(self, status_code: int) -> None: ...

    def write(self, data: bytes) -> int: ...


class ResponseRecorder:
    """In-memory ``ResponseSink`` that can be turned into a FastAPI response."""

    def __init__(self) -> None:
        self._headers = MutableHeaders()
        self.status_code: int = status.HTTP_200_OK
        self.body = bytearray()
        self.wrote_header = False

    @property
    def headers(self) -> MutableHeaders:
        return self._headers

    def write_header(self, status_code: int) -> None:
        if self.wrote_header:
            LOGGER.warning(
                "Ignoring superfluous status %s; response already started with %s",
                status_code,
                self.status_code,
            )
            return
        self.status_code = status_code
        self.wrote_header = True

    def write(self, data: bytes) -> int:
        if not self.wrote_header:
            self.write_header(status.HTTP_200_OK)
        self.body.extend(data)
        return len(data)

    def to_response(self) -> Response:
        """Build a response carrying the recorded status, headers and body."""

        return Response(
            content=bytes(self.body),
            status_code=self.status_code,
            headers=dict(self._headers),
        )
