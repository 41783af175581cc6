"""
Exception classes and error handling for request information.

Every failure raised while building a request is one of the errors below.
They are raised immediately and never retried; the preview service turns
them into consistent error responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""
    detail: str
    error_code: str | None = None


class RequestInformationError(Exception):
    """Base exception for request building errors."""

    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str | None = None
    ):
        self.detail = detail
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(detail)


class InvalidArgumentError(RequestInformationError, ValueError):
    """Raised when a required string is empty or a sequence has no items."""

    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="INVALID_ARGUMENT"
        )


class NullArgumentError(RequestInformationError, ValueError):
    """Raised when a required argument is None."""

    def __init__(self, argument_name: str):
        self.argument_name = argument_name
        super().__init__(
            detail=f"{argument_name} cannot be None",
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="NULL_ARGUMENT"
        )


class MalformedUriError(RequestInformationError, ValueError):
    """Raised when a URI string cannot be parsed."""

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        super().__init__(
            detail=f"Malformed URI {uri!r}: {reason}",
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="MALFORMED_URI"
        )


class SerializationError(RequestInformationError):
    """Raised when the request body could not be serialized."""

    def __init__(self, detail: str = "could not serialize payload"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code="SERIALIZATION_FAILURE"
        )


async def request_information_exception_handler(
    request: Request, exc: RequestInformationError
) -> JSONResponse:
    """Handler for request building errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=exc.detail, error_code=exc.error_code).model_dump()
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handler for Pydantic validation errors."""
    errors = exc.errors()
    error_messages = []
    for error in errors:
        loc = " -> ".join(str(l) for l in error["loc"])
        msg = error["msg"]
        error_messages.append(f"{loc}: {msg}")

    detail = "; ".join(error_messages) if error_messages else "Validation error"

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": detail, "error_code": "VALIDATION_ERROR"}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(RequestInformationError, request_information_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
