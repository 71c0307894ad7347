"""
jira-agile Exception Hierarchy

Exception Hierarchy:
    JiraAgileError (base)
    ├── RequestError
    │   ├── UrlParseError
    │   ├── StructureNotProvidedError
    │   ├── SerializationError
    │   └── RequestCreationError
    ├── ResponseError
    │   ├── NilResponseError
    │   ├── RequestFailedError
    │   ├── BodyReadError
    │   └── DecodeError
    └── ConfigurationError
        ├── InvalidConfigurationError
        └── ConfigurationValidationError

Transport failures (connection errors, timeouts) are not wrapped: the
``requests`` exception propagates to the caller unchanged.
"""

from .base import ExceptionContext, JiraAgileError

# Configuration exceptions
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

# Request construction exceptions
from .request import (
    RequestCreationError,
    RequestError,
    SerializationError,
    StructureNotProvidedError,
    UrlParseError,
)

# Response handling exceptions
from .response import (
    BodyReadError,
    DecodeError,
    NilResponseError,
    RequestFailedError,
    ResponseError,
)

__all__ = [
    # Base
    "JiraAgileError",
    "ExceptionContext",
    # Request construction
    "RequestError",
    "UrlParseError",
    "StructureNotProvidedError",
    "SerializationError",
    "RequestCreationError",
    # Response handling
    "ResponseError",
    "NilResponseError",
    "RequestFailedError",
    "BodyReadError",
    "DecodeError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
