"""Gateway error taxonomy and JSON error bodies.

Two kinds of failure reach the caller:

* ``RequestValidationFailed`` (400): a required field is missing or a
  stated bound is violated.  Raised before any provider call.
* ``ProviderError`` (500): the upstream call failed for any reason.  The
  provider's message is surfaced verbatim under ``details``.

Every error body carries an ``error`` field.
"""
import logging
from typing import Any, Optional

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


class GatewayError(Exception):
    """Base exception for gateway errors."""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RequestValidationFailed(GatewayError):
    """Raised when the client omitted a required field or broke a bound."""
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class ProviderError(GatewayError):
    """Raised when a call to the upstream LLM provider fails."""
    def __init__(self, message: Optional[str] = None):
        super().__init__(message or UNKNOWN_ERROR, status_code=500)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ProviderError":
        """Wrap any exception, keeping its message when it has one.

        SDK errors expose ``.message``; everything else falls back to
        ``str(exc)`` and then to ``"Unknown error"``.
        """
        if isinstance(exc, ProviderError):
            return exc
        message = getattr(exc, "message", None)
        if not isinstance(message, str) or not message:
            message = str(exc)
        return cls(message)


def error_response(
    error: str,
    status_code: int,
    details: Any = None,
) -> JSONResponse:
    """Build the ``{error, details?}`` JSON body used by every failure path."""
    content: dict = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(content, status_code=status_code)


def provider_error_response(error: str, exc: ProviderError) -> JSONResponse:
    """Log a provider failure and convert it to a 500 response.

    Args:
        error: Route-specific fixed message.
        exc:   The provider failure.
    """
    logger.error("%s: %s", error, exc.message, exc_info=exc)
    return error_response(error, exc.status_code, details=exc.message)
