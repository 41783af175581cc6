"""
Base class for per-request options.

A request option is a typed configuration value attached to a single
request and consumed by the transport or its middleware. Options are unique
by kind: a request holds at most one option for any given key.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class RequestOption(BaseModel):
    """
    Base class for request options.

    Subclasses may set ``key`` to pin their kind explicitly. Without it the
    kind is the subclass's dotted import path, which stays stable for the
    lifetime of the class regardless of the field values of an instance.
    """

    key: ClassVar[str | None] = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def get_key(cls) -> str:
        """Return the kind identifier options of this class are stored under."""
        return cls.key or f"{cls.__module__}.{cls.__qualname__}"
