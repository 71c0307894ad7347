"""
Request construction exceptions.

Raised before anything is sent over the wire: endpoint resolution, payload
serialization and request preparation.
"""

from typing import Optional

from .base import ExceptionContext, JiraAgileError
from .templates import ErrorCodes, ErrorFormatter


class RequestError(JiraAgileError):
    """Base class for errors raised while building a request."""
    pass


class UrlParseError(RequestError):
    """Raised when the site URL or a relative API path is malformed."""

    def __init__(self, url: str, details: str):
        self.url = url
        self.details = details
        message = ErrorFormatter.format_message(ErrorCodes.URL_PARSE, details=details)
        context = ExceptionContext(
            help_text="Check the configured site and the endpoint path for typos or unescaped characters",
            error_code=ErrorCodes.URL_PARSE,
            context={"url": url},
        )
        super().__init__(message, context)


class StructureNotProvidedError(RequestError):
    """Raised when an endpoint that requires a body was given None."""

    def __init__(self):
        message = ErrorFormatter.format_message(ErrorCodes.STRUCTURE_NOT_PROVIDED)
        super().__init__(message, error_code=ErrorCodes.STRUCTURE_NOT_PROVIDED)


class SerializationError(RequestError):
    """Raised when a payload cannot be encoded as JSON."""

    def __init__(self, structure_type: str, details: str):
        self.structure_type = structure_type
        message = ErrorFormatter.format_message(ErrorCodes.SERIALIZATION, details=details)
        context = ExceptionContext(
            help_text="Payloads must be pydantic models, dataclasses or JSON-compatible values",
            error_code=ErrorCodes.SERIALIZATION,
            context={"structure_type": structure_type},
        )
        super().__init__(message, context)


class RequestCreationError(RequestError):
    """Raised when the HTTP request object cannot be prepared."""

    def __init__(self, details: str, method: Optional[str] = None, endpoint: Optional[str] = None):
        self.method = method
        self.endpoint = endpoint
        message = ErrorFormatter.format_message(ErrorCodes.REQUEST_CREATION, details=details)
        context = ExceptionContext(
            error_code=ErrorCodes.REQUEST_CREATION,
            context={"method": method, "endpoint": endpoint},
        )
        super().__init__(message, context)
