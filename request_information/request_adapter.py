"""
Contract between RequestInformation and the HTTP execution layer.
"""

from typing import Protocol, runtime_checkable

from .serialization import SerializationWriterFactory


@runtime_checkable
class RequestAdapter(Protocol):
    """Service that executes requests and supplies their serialization writers."""

    def get_serialization_writer_factory(self) -> SerializationWriterFactory:
        ...
