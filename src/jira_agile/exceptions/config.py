"""
Configuration-related exceptions.

All exceptions related to configuration parsing and validation.
"""

from typing import Any, List

from .base import ExceptionContext, JiraAgileError
from .templates import ErrorCodes, ErrorFormatter


class ConfigurationError(JiraAgileError):
    """Base class for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = ErrorFormatter.format_message(
            ErrorCodes.CONFIG_INVALID, field=field, value=value, expected=expected
        )
        help_text = f"Please check the configuration for '{field}' and ensure it matches the expected format: {expected}"
        context = ExceptionContext(
            help_text=help_text,
            error_code=ErrorCodes.CONFIG_INVALID,
            user_action="Run 'jira-agile config' to inspect the effective configuration",
        )
        super().__init__(message, context)


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = ErrorFormatter.format_message(
            ErrorCodes.CONFIG_VALIDATION,
            errors="".join(f"\n  - {error}" for error in errors),
        )
        context = ExceptionContext(
            help_text="Please check your configuration file and environment and fix the validation errors listed above",
            error_code=ErrorCodes.CONFIG_VALIDATION,
        )
        super().__init__(message, context)
