"""
Request adapter turning RequestInformation into httpx requests.

This service converts the abstract request into an ``httpx.Request`` ready
to be sent by an ``httpx.Client`` or ``httpx.AsyncClient``. Sending, retries
and authentication belong to the client the request is handed to.
"""

import logging
from collections.abc import Callable
from urllib.parse import quote

import httpx

from ..exceptions import InvalidArgumentError, NullArgumentError
from ..http_method import HttpMethod
from ..request_information import RequestInformation
from ..request_option import RequestOption
from ..serialization import SerializationWriterFactory, default_registry


logger = logging.getLogger(__name__)


def _unchanged(request: httpx.Request) -> httpx.Request:
    return request


class TelemetryHandlerOption(RequestOption):
    """
    Request option enriching the outgoing request with telemetry.

    The configurator receives the built ``httpx.Request`` and returns the
    request to send, typically after adding headers to it.
    """

    telemetry_configurator: Callable[[httpx.Request], httpx.Request] = _unchanged


def encode_query_parameters(parameters: dict[str, str | None]) -> str:
    """
    Encode query parameters into a query string.

    Parameters without a value are rendered as a bare name.

    Example:
        >>> encode_query_parameters({"q": "a b", "flag": None})
        'q=a%20b&flag'
    """
    pairs = []
    for name, value in parameters.items():
        if value is None:
            pairs.append(quote(name, safe=""))
        else:
            pairs.append(f"{quote(name, safe='')}={quote(str(value), safe='')}")
    return "&".join(pairs)


class HttpxRequestAdapter:
    """
    Builds httpx requests from RequestInformation.

    Args:
        serialization_writer_factory: Factory used to serialize request
            bodies; defaults to the shared registry
    """

    def __init__(self, serialization_writer_factory: SerializationWriterFactory | None = None):
        self._serialization_writer_factory = serialization_writer_factory or default_registry

    def get_serialization_writer_factory(self) -> SerializationWriterFactory:
        return self._serialization_writer_factory

    def get_request_url(self, request_info: RequestInformation) -> str:
        """Return the request URI with its query parameters appended."""
        if request_info is None:
            raise NullArgumentError("request_info")
        url = str(request_info.uri) if request_info.uri is not None else ""
        if request_info.query_parameters:
            query_string = encode_query_parameters(dict(request_info.query_parameters.items()))
            url = url + ("&" if "?" in url else "?") + query_string
        return url

    def build_request(self, request_info: RequestInformation) -> httpx.Request:
        """
        Convert ``request_info`` into an ``httpx.Request``.

        Telemetry options attached to the request are applied last.

        Raises:
            NullArgumentError: request_info is None
            InvalidArgumentError: the request has no method or no URI
        """
        if request_info is None:
            raise NullArgumentError("request_info")
        if request_info.http_method is None:
            raise InvalidArgumentError("http_method cannot be None")
        if request_info.uri is None:
            raise InvalidArgumentError("uri cannot be None")

        content = request_info.content
        if content is not None and hasattr(content, "read"):
            content = content.read()

        request = httpx.Request(
            method=HttpMethod(request_info.http_method).value,
            url=self.get_request_url(request_info),
            headers=list(request_info.headers.multi_items()),
            content=content
        )

        for option in request_info.request_options:
            if isinstance(option, TelemetryHandlerOption):
                request = option.telemetry_configurator(request)

        logger.debug("Built %s request for %s", request.method, request.url)
        return request
