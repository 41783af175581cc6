"""
Abstract HTTP request representation shared by generated API clients and
their HTTP execution layer.
"""

from .exceptions import (
    InvalidArgumentError,
    MalformedUriError,
    NullArgumentError,
    RequestInformationError,
    SerializationError,
)
from .http_method import HttpMethod
from .query_parameters import QueryParameters
from .request_adapter import RequestAdapter
from .request_information import (
    BINARY_CONTENT_TYPE,
    CONTENT_TYPE_HEADER,
    RequestInformation,
)
from .request_option import RequestOption

__all__ = [
    "InvalidArgumentError",
    "MalformedUriError",
    "NullArgumentError",
    "RequestInformationError",
    "SerializationError",
    "HttpMethod",
    "QueryParameters",
    "RequestAdapter",
    "BINARY_CONTENT_TYPE",
    "CONTENT_TYPE_HEADER",
    "RequestInformation",
    "RequestOption",
]
