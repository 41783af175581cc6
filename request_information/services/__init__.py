# Services package

from .httpx_adapter import (
    HttpxRequestAdapter,
    TelemetryHandlerOption,
    encode_query_parameters,
)

__all__ = [
    "HttpxRequestAdapter",
    "TelemetryHandlerOption",
    "encode_query_parameters",
]
