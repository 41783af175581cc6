"""
Registry dispatching serialization writer requests by content type.
"""

import logging
import re

from ..exceptions import InvalidArgumentError, NullArgumentError
from .json_serialization_writer import JsonSerializationWriterFactory
from .serialization_writer import SerializationWriter, SerializationWriterFactory


logger = logging.getLogger(__name__)

# Matches the vendor prefix of a structured syntax suffix, e.g. "vnd.github.v3+"
VENDOR_SPECIFIC_PATTERN = re.compile(r"[^/]+\+")


def clean_content_type(content_type: str) -> str:
    """
    Reduce a content type to the form factories are registered under.

    Parameters are dropped and vendor-specific types are collapsed onto
    their structured syntax suffix.

    Example:
        >>> clean_content_type("application/vnd.github.v3+json; charset=utf-8")
        'application/json'
    """
    media_type = content_type.split(";", 1)[0].strip().lower()
    return VENDOR_SPECIFIC_PATTERN.sub("", media_type)


class SerializationWriterFactoryRegistry(SerializationWriterFactory):
    """Holds one factory per content type and delegates to the matching one."""

    def __init__(self):
        self.content_type_associated_factories: dict[str, SerializationWriterFactory] = {}

    def register(self, factory: SerializationWriterFactory) -> None:
        """Register ``factory`` under its valid content type, replacing any previous one."""
        content_type = clean_content_type(factory.get_valid_content_type())
        self.content_type_associated_factories[content_type] = factory
        logger.debug("Registered serialization writer factory for %s", content_type)

    def get_valid_content_type(self) -> str:
        raise NotImplementedError(
            "The registry supports multiple content types, get the registered factory instead"
        )

    def get_serialization_writer(self, content_type: str) -> SerializationWriter:
        if content_type is None:
            raise NullArgumentError("content_type")
        if not content_type:
            raise InvalidArgumentError("content_type cannot be empty")

        cleaned = clean_content_type(content_type)
        factory = self.content_type_associated_factories.get(cleaned)
        if factory is None:
            raise ValueError(
                f"Content type {cleaned} does not have a factory registered to be serialized"
            )
        return factory.get_serialization_writer(cleaned)


default_registry = SerializationWriterFactoryRegistry()
default_registry.register(JsonSerializationWriterFactory())
