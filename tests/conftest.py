"""Pytest configuration for the httperrors test suite."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


def _ensure_src_on_path() -> None:
    """Add the ``src`` directory to ``sys.path`` for in-place runs."""

    src_dir = Path(__file__).resolve().parent.parent / "src"
    src_path = str(src_dir)
    if src_dir.is_dir() and src_path not in sys.path:
        sys.path.insert(0, src_path)


_ensure_src_on_path()

from httperrors.handlers import HTTPError, register_error_handlers  # noqa: E402
from httperrors.sinks import ResponseRecorder  # noqa: E402


@pytest.fixture()
def recorder() -> ResponseRecorder:
    return ResponseRecorder()


@pytest.fixture()
def error_app() -> FastAPI:
    """Provide a FastAPI application whose routes fail with ``HTTPError``."""

    app = FastAPI()
    register_error_handlers(app)

    @app.post("/protected")
    async def protected() -> dict[str, str]:
        raise HTTPError(401, "missing token")

    @app.get("/upstream")
    async def upstream() -> dict[str, str]:
        raise HTTPError(424, "upstream timeout")

    @app.get("/ok")
    async def ok() -> dict[str, str]:
        return {"status": "ok"}

    return app


@pytest.fixture()
def test_client(error_app: FastAPI) -> Iterator[TestClient]:
    with TestClient(error_app) as client:
        yield client
