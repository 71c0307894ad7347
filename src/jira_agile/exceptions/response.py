"""
Response handling exceptions.

Every error raised after a response arrived keeps the ResponseScheme
envelope on ``.response`` so the call can be diagnosed without re-issuing it.
"""

import json
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .base import ExceptionContext, JiraAgileError
from .templates import ErrorCodes, ErrorFormatter

if TYPE_CHECKING:
    from jira_agile.infrastructure.http.response import ResponseScheme


class ResponseError(JiraAgileError):
    """Base class for errors raised while handling a response."""

    def __init__(self, message: str, context: Optional[ExceptionContext] = None,
                 response: Optional["ResponseScheme"] = None, **kwargs):
        self.response = response
        super().__init__(message, context, **kwargs)
        if response is not None:
            self.context.setdefault("endpoint", response.endpoint)
            self.context.setdefault("method", response.method)


class NilResponseError(ResponseError):
    """Raised when the transformer is handed no response at all."""

    def __init__(self):
        message = ErrorFormatter.format_message(ErrorCodes.NIL_RESPONSE)
        super().__init__(message, error_code=ErrorCodes.NIL_RESPONSE)


class RequestFailedError(ResponseError):
    """Raised when Jira answers with a status code outside [200, 300)."""

    def __init__(self, status_code: int, response: Optional["ResponseScheme"] = None):
        self.status_code = status_code
        self.error_messages, self.errors = _parse_jira_errors(response)

        message = ErrorFormatter.format_message(ErrorCodes.REQUEST_FAILED, status_code=status_code)
        technical_details = None
        details = self.error_messages + [f"{k}: {v}" for k, v in self.errors.items()]
        if details:
            technical_details = "; ".join(details)

        context = ExceptionContext(
            help_text=ErrorFormatter.help_for_status(status_code),
            error_code=ErrorCodes.REQUEST_FAILED,
            context={"status_code": status_code},
            technical_details=technical_details,
        )
        super().__init__(message, context, response=response)


class BodyReadError(ResponseError):
    """Raised when the response body stream cannot be drained."""

    def __init__(self, details: str, response: Optional["ResponseScheme"] = None):
        message = ErrorFormatter.format_message(ErrorCodes.BODY_READ, details=details)
        super().__init__(message, response=response, error_code=ErrorCodes.BODY_READ)


class DecodeError(ResponseError):
    """Raised when the response body does not decode into the destination."""

    def __init__(self, destination: str, details: str, response: Optional["ResponseScheme"] = None):
        self.destination = destination
        message = ErrorFormatter.format_message(ErrorCodes.DECODE, details=details)
        context = ExceptionContext(
            help_text="Inspect error.response.raw_bytes for the payload Jira returned",
            error_code=ErrorCodes.DECODE,
            context={"destination": destination},
        )
        super().__init__(message, context, response=response)


def _parse_jira_errors(response: Optional["ResponseScheme"]):
    """Pull ``errorMessages`` and ``errors`` out of a Jira error body."""
    error_messages: List[str] = []
    errors: Dict[str, Any] = {}
    if response is None or not response.raw_bytes:
        return error_messages, errors

    try:
        body = json.loads(response.raw_bytes)
    except ValueError:
        return error_messages, errors

    if isinstance(body, dict):
        messages = body.get("errorMessages")
        if isinstance(messages, list):
            error_messages = [str(m) for m in messages]
        field_errors = body.get("errors")
        if isinstance(field_errors, dict):
            errors = dict(field_errors)
    return error_messages, errors
