"""
Shared error handling for the Translations Lookup service.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel
from opentelemetry import trace


GENERIC_FAILURE_MESSAGE = (
    "An unexpected error occurred. Something may be wrong with the translation API "
    "or this server's configuration. If you continue to have problems, please try "
    "the support forums: {support_url}"
)


class ErrorResponse(BaseModel):
    """Standard error response format."""

    trace_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class TranslationsException(Exception):
    """Base exception for the Translations Lookup service."""

    status_code = 500

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self, message: Optional[str] = None) -> ErrorResponse:
        """Convert to error response."""
        trace_id = None
        current_span = trace.get_current_span()
        if current_span and current_span.is_recording():
            span_context = current_span.get_span_context()
            if span_context.trace_id != 0:
                trace_id = f"{span_context.trace_id:032x}"

        return ErrorResponse(
            trace_id=trace_id,
            code=self.code,
            message=message or self.message,
            details=self.details
        )


class FetchError(TranslationsException):
    """A translation lookup could not produce a result."""

    def user_message(self, support_url: str) -> str:
        """Message suitable for showing to an end user of the host."""
        return GENERIC_FAILURE_MESSAGE.format(support_url=support_url)


class InvalidRequestError(FetchError):
    """The lookup request violates the caller contract (unsupported kind, bad slug)."""

    status_code = 400

    def __init__(self, message: str = "Invalid translation type.", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_REQUEST", message, details)

    def user_message(self, support_url: str) -> str:
        return self.message


class TransportError(FetchError):
    """The remote translation service was unreachable or too slow."""

    status_code = 502

    def __init__(self, cause: BaseException, details: Optional[Dict[str, Any]] = None):
        self.cause = cause
        details = dict(details or {})
        details.setdefault("error", str(cause) or type(cause).__name__)
        super().__init__("TRANSPORT_ERROR", f"Translation API request failed: {type(cause).__name__}", details)


class InvalidPayloadError(FetchError):
    """The remote service answered with a body that is not a JSON object or array."""

    status_code = 502

    def __init__(self, raw_body: str, details: Optional[Dict[str, Any]] = None):
        self.raw_body = raw_body
        details = dict(details or {})
        details.setdefault("body", raw_body)
        super().__init__("INVALID_PAYLOAD", "Translation API returned an invalid payload", details)
