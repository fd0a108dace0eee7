"""
Custom exceptions for the LLM client layer.

A ModelServiceError is a per-email failure: the batch classifier absorbs it
and degrades that email to REVIEW. None of these cross the HTTP boundary.
"""


class ModelServiceError(Exception):
    """
    Base exception for all local model service errors.

    All client exceptions inherit from this so a single except clause can
    catch any failed classification call.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ModelConnectionError(ModelServiceError):
    """
    Raised when the local model service cannot be reached.

    Includes refused connections, DNS failures and broken transports.
    """
    pass


class ModelTimeoutError(ModelConnectionError):
    """
    Raised when a chat call exceeds OLLAMA_TIMEOUT.

    Separate from generic connection errors so logs tell a slow model apart
    from a stopped service.
    """
    pass


class ModelGenerationError(ModelServiceError):
    """
    Raised when the service answered but not with a usable chat response.

    Examples:
    - Non-2xx status (model not found, out of memory)
    - Body that is not JSON
    - Body carrying an ``error`` field
    """
    pass
