"""
Boundary exceptions for the scan service.

Only these errors cross the HTTP boundary. Each one knows its status code
and renders the JSON body the browser client branches on (``ollamaAvailable``,
``availableModels``), so the exception handlers stay generic.
"""

from typing import Any


class ScanError(Exception):
    """
    Base exception for all scan boundary errors.

    Attributes:
        message: Human-readable error, sent as the ``error`` field
        status_code: HTTP status for the response
        details: Structured context for logging
    """

    status_code: int = 500
    metric_status: str = "error"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_payload(self) -> dict[str, Any]:
        """JSON body returned to the client."""
        return {"error": self.message}


NO_EMAILS_MESSAGE = "No emails provided"


class InvalidRequest(ScanError):
    """Missing or empty email list. Not retried."""

    status_code = 400
    metric_status = "invalid_request"


class ServiceUnavailable(ScanError):
    """Local model service is not reachable; the user should start it."""

    status_code = 503
    metric_status = "service_unavailable"

    def __init__(self, message: str = "Ollama is not running. Please start Ollama on your local machine."):
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "ollamaAvailable": False}


class NoModelInstalled(ScanError):
    """Service is up but has no model; the message names one to pull."""

    status_code = 404
    metric_status = "no_model_installed"

    def __init__(self, default_model: str):
        super().__init__(
            f"No models available. Run: ollama pull {default_model}",
            details={"default_model": default_model},
        )
        self.default_model = default_model

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "ollamaAvailable": True, "availableModels": []}


class InternalError(ScanError):
    """Anything unexpected while scanning, wrapped with its message."""

    status_code = 500
    metric_status = "internal_error"

    def __init__(self, cause: BaseException):
        message = str(cause) or type(cause).__name__
        super().__init__(
            f"Failed to classify emails: {message}",
            details={"error_type": type(cause).__name__},
        )
