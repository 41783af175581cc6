"""
Base class for the query parameter models of generated request builders.

Each operation gets a QueryParameters subclass whose fields are the
operation's query options. Fields carry the wire name as their alias:

    class ListUsersQueryParameters(QueryParameters):
        top: int | None = Field(default=None, alias="$top")
        select: list[str] | None = Field(default=None, alias="$select")
"""

from collections.abc import MutableMapping
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from .exceptions import NullArgumentError


def format_query_value(value: Any) -> str:
    """Render a field value the way it appears in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set)):
        return ",".join(format_query_value(item) for item in value)
    return str(value)


class QueryParameters(BaseModel):
    """Query options of a single operation."""

    model_config = ConfigDict(populate_by_name=True)

    def add_query_parameters(self, target: MutableMapping[str, str | None]) -> None:
        """Copy every field that is set into ``target`` under its wire name."""
        if target is None:
            raise NullArgumentError("target")
        for name, value in self.model_dump(by_alias=True, exclude_none=True).items():
            target[name] = format_query_value(value)
