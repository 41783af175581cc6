"""
Request preparation API routes.

Builds a RequestInformation from the submitted description, serializes its
body and returns the request exactly as the httpx adapter would send it.
Nothing is sent over the network.
"""

import httpx
from fastapi import APIRouter, Depends

from ..request_information import RequestInformation
from ..schemas.prepare import JsonPayload, PrepareRequest, PreparedRequest
from ..services.httpx_adapter import HttpxRequestAdapter, TelemetryHandlerOption


router = APIRouter(prefix="/api/prepare", tags=["prepare"])


def get_request_adapter() -> HttpxRequestAdapter:
    """Dependency function providing the request adapter."""
    return HttpxRequestAdapter()


def _telemetry_option(headers: dict[str, str]) -> TelemetryHandlerOption:
    def configure(request: httpx.Request) -> httpx.Request:
        request.headers.update(headers)
        return request

    return TelemetryHandlerOption(telemetry_configurator=configure)


@router.post("", response_model=PreparedRequest)
async def prepare_request(
    payload: PrepareRequest,
    adapter: HttpxRequestAdapter = Depends(get_request_adapter)
):
    """
    Prepare an HTTP request without sending it.

    Args:
        payload: Description of the request
        adapter: Request adapter used for serialization and conversion

    Returns:
        PreparedRequest with the final URL, headers and body

    Raises:
        InvalidArgumentError: 400 for an empty raw URL or empty body list
        MalformedUriError: 400 for an unparseable URL
        SerializationError: 500 when the body cannot be serialized
    """
    request_info = RequestInformation(payload.method)
    request_info.set_uri(payload.current_path, payload.path_segment, payload.raw_url)
    for name, value in payload.query_params.items():
        request_info.query_parameters[name] = value

    for name, value in payload.headers.items():
        request_info.headers[name] = value

    if payload.body is not None:
        if isinstance(payload.body, list):
            values = [JsonPayload.model_validate(item) for item in payload.body]
        else:
            values = JsonPayload.model_validate(payload.body)
        request_info.set_content_from_parsable(adapter, payload.content_type, values)

    if payload.telemetry_headers:
        request_info.add_request_options(_telemetry_option(payload.telemetry_headers))

    request = adapter.build_request(request_info)
    body = request.content.decode("utf-8", errors="replace") if request.content else None

    return PreparedRequest(
        method=request.method,
        url=str(request.url),
        headers=dict(request.headers),
        body=body,
        options=[option.get_key() for option in request_info.request_options]
    )
