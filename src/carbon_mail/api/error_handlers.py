"""
FastAPI exception handlers for structured error responses.

Maps boundary exceptions to their HTTP status codes and JSON bodies.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from carbon_mail.service.exceptions import (
    NO_EMAILS_MESSAGE,
    InternalError,
    InvalidRequest,
    NoModelInstalled,
    ScanError,
    ServiceUnavailable,
)

logger = logging.getLogger(__name__)

# Validation error locations meaning "no usable email list"
EMAIL_LIST_LOCATIONS = {("body",), ("body", "emails")}


async def scan_error_handler(request: Request, exc: ScanError) -> JSONResponse:
    """
    Handle scan boundary errors.

    The exception carries its own status code and payload:
    InvalidRequest 400, NoModelInstalled 404, InternalError 500,
    ServiceUnavailable 503.

    Args:
        request: FastAPI request
        exc: ScanError instance

    Returns:
        JSON error response
    """
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Scan request failed",
        extra={
            "error_type": type(exc).__name__,
            "status_code": exc.status_code,
            "error": exc.message,
            "details": exc.details,
        },
    )

    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies (wrong types, missing email fields).

    Maps to 400 Bad Request (client error). A missing body or an ``emails``
    value that is not a list reads as "No emails provided"; errors inside
    individual emails keep the generic "Invalid request" message.
    """
    errors = exc.errors()
    logger.warning(
        "Invalid request format",
        extra={"errors": errors},
    )

    if any(tuple(error.get("loc", ())) in EMAIL_LIST_LOCATIONS for error in errors):
        content = InvalidRequest(NO_EMAILS_MESSAGE).to_payload()
    else:
        content = {"error": "Invalid request"}
    content["details"] = jsonable_encoder(errors)

    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors outside the scan service.

    Maps to 500 Internal Server Error.
    """
    logger.exception(
        "Unexpected error",
        extra={"error_type": type(exc).__name__},
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    ScanError: scan_error_handler,
    InvalidRequest: scan_error_handler,
    ServiceUnavailable: scan_error_handler,
    NoModelInstalled: scan_error_handler,
    InternalError: scan_error_handler,
    RequestValidationError: request_validation_error_handler,
    Exception: generic_error_handler,
}
