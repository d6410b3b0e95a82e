"""Pydantic models for error payloads."""

from .errors import ErrorResponse

__all__ = ["ErrorResponse"]
