"""
JSON serialization writer backed by pydantic.
"""

from collections.abc import Sequence
from typing import Any

from pydantic_core import to_json

from ..exceptions import InvalidArgumentError, NullArgumentError
from .parsable import Parsable
from .serialization_writer import SerializationWriter, SerializationWriterFactory


JSON_CONTENT_TYPE = "application/json"


class JsonSerializationWriter(SerializationWriter):
    """
    Writes models as JSON.

    Values written with a key are collected into a JSON object; a value
    written with ``key=None`` becomes the document root. Fields are written
    under their aliases and ``None`` fields are left out.
    """

    def __init__(self):
        self._root: Any = None
        self._members: dict[str, Any] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed serialization writer")

    def _assign(self, key: str | None, value: Any) -> None:
        if key:
            self._members[key] = value
        else:
            self._root = value

    def write_object_value(self, key: str | None, value: Parsable) -> None:
        self._check_open()
        self._assign(key, value)

    def write_collection_of_object_values(
        self, key: str | None, values: Sequence[Parsable]
    ) -> None:
        self._check_open()
        self._assign(key, list(values))

    def get_serialized_content(self) -> bytes:
        self._check_open()
        document = self._root
        if self._members:
            document = dict(self._members)
        return to_json(document, by_alias=True, exclude_none=True)

    def close(self) -> None:
        self._root = None
        self._members = {}
        self._closed = True


class JsonSerializationWriterFactory(SerializationWriterFactory):
    """Creates JsonSerializationWriter instances for application/json."""

    def get_valid_content_type(self) -> str:
        return JSON_CONTENT_TYPE

    def get_serialization_writer(self, content_type: str) -> SerializationWriter:
        if content_type is None:
            raise NullArgumentError("content_type")
        if not content_type:
            raise InvalidArgumentError("content_type cannot be empty")
        if content_type != JSON_CONTENT_TYPE:
            raise ValueError(
                f"expected a {JSON_CONTENT_TYPE} content type, got {content_type!r}"
            )
        return JsonSerializationWriter()
