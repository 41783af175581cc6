"""
Pydantic schemas for request preparation.

Defines the payload describing a request to build and the prepared request
returned to the caller.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..http_method import HttpMethod
from ..serialization import JSON_CONTENT_TYPE, Parsable


class JsonPayload(Parsable):
    """Free-form JSON object used as a request body."""
    model_config = ConfigDict(extra="allow")


class PrepareRequest(BaseModel):
    """Schema describing a request to build."""
    method: HttpMethod
    current_path: str | None = None
    path_segment: str = ""
    raw_url: bool = False
    headers: dict[str, str] = {}
    query_params: dict[str, str | None] = {}
    content_type: str = JSON_CONTENT_TYPE
    body: dict[str, Any] | list[dict[str, Any]] | None = None
    telemetry_headers: dict[str, str] = {}


class PreparedRequest(BaseModel):
    """
    Schema for a prepared request.

    Contains the final URL with its query string, the headers that would be
    sent, the serialized body and the kinds of options attached.
    """
    method: str
    url: str
    headers: dict[str, str]
    body: str | None = None
    options: list[str] = []
