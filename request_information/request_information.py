"""
Abstract representation of a single outgoing HTTP request.

Generated client code creates one RequestInformation per API call, sets the
target URI, method, headers, query parameters, options and body, then hands
it to a request adapter which turns it into a transport request.
"""

import logging
from collections.abc import Callable, Collection, Sequence
from typing import BinaryIO

import httpx
from multidict import CIMultiDict

from .exceptions import (
    InvalidArgumentError,
    MalformedUriError,
    NullArgumentError,
    SerializationError,
)
from .http_method import HttpMethod
from .query_parameters import QueryParameters
from .request_adapter import RequestAdapter
from .request_option import RequestOption
from .serialization import Parsable


logger = logging.getLogger(__name__)

CONTENT_TYPE_HEADER = "Content-Type"
BINARY_CONTENT_TYPE = "application/octet-stream"


def parse_uri(uri: str) -> httpx.URL:
    """Parse ``uri`` into a URL, raising MalformedUriError when it is invalid."""
    try:
        return httpx.URL(uri)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise MalformedUriError(uri, str(e)) from e


def parse_query_string(query_string: str) -> dict[str, str | None]:
    """
    Split a raw query string into parameters.

    Each ``&``-separated token is split on its first ``=`` only, so values
    may themselves contain ``=``. A token without ``=`` maps to None. Tokens
    with an empty name are dropped. Later tokens override earlier ones.

    Example:
        >>> parse_query_string("a=1&flag&b=x=y&=z")
        {'a': '1', 'flag': None, 'b': 'x=y'}
    """
    parameters: dict[str, str | None] = {}
    for token in query_string.split("&"):
        name, separator, value = token.partition("=")
        if not name:
            if token:
                logger.debug("Dropping query parameter without a name: %r", token)
            continue
        parameters[name] = value if separator else None
    return parameters


class RequestInformation:
    """
    The request being built.

    Attributes:
        uri: Target URI, None until set_uri succeeds
        http_method: HTTP method, None until set by the caller
        query_parameters: Query parameters, case-insensitive names; a None
            value means the name is present without a value
        headers: Request headers, case-insensitive names
        content: Request body, bytes or a binary stream
    """

    def __init__(self, http_method: HttpMethod | None = None):
        self.uri: httpx.URL | None = None
        self.http_method: HttpMethod | None = http_method
        self.query_parameters: CIMultiDict = CIMultiDict()
        self.headers: httpx.Headers = httpx.Headers()
        self.content: bytes | BinaryIO | None = None
        self._request_options: dict[str, RequestOption] = {}

    def set_uri(
        self,
        current_path: str | None,
        path_segment: str | None,
        is_raw_url: bool
    ) -> None:
        """
        Set the target URI of the request.

        Args:
            current_path: The current path (scheme, host, port, path and,
                for raw URLs, query string) of the request
            path_segment: The segment to append to the current path; ignored
                for raw URLs
            is_raw_url: When True, current_path is a complete URL whose
                query string is parsed into query_parameters

        Raises:
            InvalidArgumentError: is_raw_url is True and current_path is empty
            MalformedUriError: the resulting URI cannot be parsed
        """
        if not is_raw_url:
            self.uri = parse_uri((current_path or "") + (path_segment or ""))
            logger.debug("Resolved request URI %s", self.uri)
            return

        if not current_path:
            raise InvalidArgumentError("current_path cannot be None or empty")

        scheme_host_and_path, separator, query_string = current_path.partition("?")
        uri = parse_uri(scheme_host_and_path)
        parameters = parse_query_string(query_string) if separator else {}

        self.uri = uri
        for name, value in parameters.items():
            self.query_parameters[name] = value
        logger.debug(
            "Resolved raw request URI %s with %d query parameter(s)",
            uri,
            len(parameters)
        )

    def add_query_parameters(self, parameters: QueryParameters | None) -> None:
        """Copy the set fields of a generated query parameters model into the request."""
        if parameters is None:
            return
        parameters.add_query_parameters(self.query_parameters)

    def configure_headers(self, consumer: Callable[[httpx.Headers], None] | None) -> None:
        """Let ``consumer`` add or change request headers."""
        if consumer is None:
            return
        consumer(self.headers)

    @property
    def request_options(self) -> Collection[RequestOption]:
        """The request options, at most one per kind, in no particular order."""
        return list(self._request_options.values())

    def add_request_options(self, *options: RequestOption) -> None:
        """Add options, replacing any option of the same kind already present."""
        if not options:
            return
        for option in options:
            if option is None:
                continue
            self._request_options[option.get_key()] = option
            logger.debug("Added request option %s", option.get_key())

    def remove_request_options(self, *options: RequestOption) -> None:
        """Remove the stored option of each given option's kind."""
        if not options:
            return
        for option in options:
            if option is None:
                continue
            self._request_options.pop(option.get_key(), None)

    def get_request_option(self, option_type: type[RequestOption]) -> RequestOption | None:
        """Return the stored option of ``option_type``'s kind, if any."""
        return self._request_options.get(option_type.get_key())

    def set_stream_content(self, value: bytes | BinaryIO) -> None:
        """
        Set the request body to a binary stream.

        Raises:
            NullArgumentError: value is None
        """
        if value is None:
            raise NullArgumentError("value")
        self.content = value
        self.headers[CONTENT_TYPE_HEADER] = BINARY_CONTENT_TYPE

    def set_content_from_parsable(
        self,
        request_adapter: RequestAdapter,
        content_type: str,
        values: Parsable | Sequence[Parsable],
    ) -> None:
        """
        Set the request body from one or more models.

        The writer is obtained from the adapter's serialization writer
        factory for ``content_type`` and is always closed before returning.
        The body and Content-Type header are only replaced once the payload
        has been fully serialized.

        Args:
            request_adapter: The adapter to get the serialization writer from
            content_type: Content type of the serialized payload
            values: A model, or a sequence of models written as a collection
                when it holds more than one item

        Raises:
            NullArgumentError: request_adapter, content_type or values is None
            InvalidArgumentError: content_type is empty or values has no items
            SerializationError: the writer could not be created or failed
        """
        if request_adapter is None:
            raise NullArgumentError("request_adapter")
        if content_type is None:
            raise NullArgumentError("content_type")
        if values is None:
            raise NullArgumentError("values")
        if not content_type:
            raise InvalidArgumentError("content_type cannot be empty")

        if isinstance(values, Parsable):
            values = [values]
        else:
            values = list(values)
        if not values:
            raise InvalidArgumentError("values cannot be empty")

        try:
            factory = request_adapter.get_serialization_writer_factory()
            with factory.get_serialization_writer(content_type) as writer:
                if len(values) == 1:
                    writer.write_object_value(None, values[0])
                else:
                    writer.write_collection_of_object_values(None, values)
                content = writer.get_serialized_content()
        except Exception as e:
            logger.debug("Serialization of %s payload failed: %s", content_type, e)
            raise SerializationError(f"could not serialize payload: {e}") from e

        self.headers[CONTENT_TYPE_HEADER] = content_type
        self.content = content
        logger.debug("Serialized %d value(s) as %s", len(values), content_type)
