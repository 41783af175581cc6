"""
Pydantic schemas package.

Exports all schemas for the request preparation API.
"""

from .prepare import (
    JsonPayload,
    PrepareRequest,
    PreparedRequest,
)

__all__ = [
    "JsonPayload",
    "PrepareRequest",
    "PreparedRequest",
]
