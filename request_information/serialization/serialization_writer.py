"""
Serialization writer contracts.

A SerializationWriter encodes one or more Parsable models into bytes for a
single content type. Writers may hold buffers or other resources, so they
are used as context managers and released with ``close()``.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from types import TracebackType

from .parsable import Parsable


class SerializationWriter(ABC):
    """Encodes models into the serialized content of a request body."""

    @abstractmethod
    def write_object_value(self, key: str | None, value: Parsable) -> None:
        """Write a single model, under ``key`` or as the root when ``key`` is None."""

    @abstractmethod
    def write_collection_of_object_values(
        self, key: str | None, values: Sequence[Parsable]
    ) -> None:
        """Write a sequence of models, under ``key`` or as the root when ``key`` is None."""

    @abstractmethod
    def get_serialized_content(self) -> bytes:
        """Return everything written so far as bytes."""

    @abstractmethod
    def close(self) -> None:
        """Release the resources held by the writer."""

    def __enter__(self) -> "SerializationWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class SerializationWriterFactory(ABC):
    """Creates serialization writers for a content type."""

    @abstractmethod
    def get_valid_content_type(self) -> str:
        """Return the content type this factory produces writers for."""

    @abstractmethod
    def get_serialization_writer(self, content_type: str) -> SerializationWriter:
        """Return a new writer for ``content_type``."""
