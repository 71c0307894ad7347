"""
Standardized error message templates and formatting utilities.

Templates live in a read-only mapping so that no caller can rewrite the
wording process-wide.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional


class ErrorCodes:
    """Standardized error codes for consistent error categorization."""

    # Request construction errors (REQUEST_xxx)
    URL_PARSE = "REQUEST_001"
    STRUCTURE_NOT_PROVIDED = "REQUEST_002"
    SERIALIZATION = "REQUEST_003"
    REQUEST_CREATION = "REQUEST_004"

    # Response handling errors (RESPONSE_xxx)
    NIL_RESPONSE = "RESPONSE_001"
    REQUEST_FAILED = "RESPONSE_002"
    BODY_READ = "RESPONSE_003"
    DECODE = "RESPONSE_004"

    # Configuration errors (CONFIG_xxx)
    CONFIG_INVALID = "CONFIG_001"
    CONFIG_VALIDATION = "CONFIG_002"


ERROR_TEMPLATES: Mapping[str, str] = MappingProxyType(
    {
        ErrorCodes.URL_PARSE: "URL parsing failed: {details}",
        ErrorCodes.STRUCTURE_NOT_PROVIDED: (
            "No payload structure was provided, please provide a valid one"
        ),
        ErrorCodes.SERIALIZATION: "Payload serialization failed: {details}",
        ErrorCodes.REQUEST_CREATION: "Request creation failed: {details}",
        ErrorCodes.NIL_RESPONSE: (
            "Validation failed, please provide a requests.Response object"
        ),
        ErrorCodes.REQUEST_FAILED: (
            "Request failed. Please analyze the request body for more details. "
            "Status Code: {status_code}"
        ),
        ErrorCodes.BODY_READ: "Reading the response body failed: {details}",
        ErrorCodes.DECODE: "Decoding the response body failed: {details}",
        ErrorCodes.CONFIG_INVALID: (
            "Invalid configuration for '{field}': got {value!r}, expected {expected}"
        ),
        ErrorCodes.CONFIG_VALIDATION: "Configuration validation failed:{errors}",
    }
)

STATUS_HELP: Mapping[int, str] = MappingProxyType(
    {
        400: "The request was rejected by Jira, check the payload and query parameters",
        401: "Verify the configured mail and API token are correct and active",
        403: "The credentials are valid but lack permission for this resource",
        404: "The resource does not exist or is not visible to this user",
        409: "The resource is in a state that conflicts with this request",
        429: "Jira rate limited the request, wait before retrying",
        500: "Jira reported an internal error, try again later",
        503: "Jira is temporarily unavailable, try again later",
    }
)


class ErrorFormatter:
    """Utility for formatting error messages with context."""

    @staticmethod
    def format_message(error_code: str, **kwargs) -> str:
        """Format the template registered for ``error_code``."""
        template = ERROR_TEMPLATES[error_code]
        try:
            return template.format(**kwargs)
        except KeyError as e:
            # If template variable is missing, return a safe fallback
            return f"Error formatting message template: missing variable {e}"

    @staticmethod
    def help_for_status(status_code: int) -> Optional[str]:
        """Get guidance for an HTTP status code, if any is known."""
        if status_code in STATUS_HELP:
            return STATUS_HELP[status_code]
        if 500 <= status_code < 600:
            return STATUS_HELP[500]
        return None

    @staticmethod
    def format_context_summary(context: Dict[str, object]) -> str:
        """Format context dictionary into a readable summary."""
        if not context:
            return ""

        items = []
        for key, value in context.items():
            if value is not None:
                if isinstance(value, (list, tuple)):
                    value = ", ".join(str(v) for v in value)
                items.append(f"{key}: {value}")

        return "; ".join(items)
