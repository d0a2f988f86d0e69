"""Pydantic schemas for API v1."""

from .dates import (
    DateNormalizeRequest,
    DateNormalizeResponse,
    ServerTimeResponse,
)

__all__ = [
    "DateNormalizeRequest",
    "DateNormalizeResponse",
    "ServerTimeResponse",
]
