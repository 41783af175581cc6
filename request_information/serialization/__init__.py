# Serialization package

from .parsable import Parsable
from .serialization_writer import SerializationWriter, SerializationWriterFactory
from .json_serialization_writer import (
    JSON_CONTENT_TYPE,
    JsonSerializationWriter,
    JsonSerializationWriterFactory,
)
from .serialization_writer_factory_registry import (
    SerializationWriterFactoryRegistry,
    clean_content_type,
    default_registry,
)

__all__ = [
    "Parsable",
    "SerializationWriter",
    "SerializationWriterFactory",
    "JSON_CONTENT_TYPE",
    "JsonSerializationWriter",
    "JsonSerializationWriterFactory",
    "SerializationWriterFactoryRegistry",
    "clean_content_type",
    "default_registry",
]
