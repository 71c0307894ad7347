"""
jira-agile: Jira Agile REST API client

Architecture Overview:
- infrastructure.http: request building, transport and response transformation
- services: per-resource endpoint wrappers (Board, Epic, Sprint)
- core.config: configuration models and loading
- exceptions: error taxonomy
- logging: logging setup
- cli: command-line interface
"""

__version__ = "0.1.0"

from .core.config import AuthenticationConfig, ConfigManager, JiraAgileConfig
from .exceptions import JiraAgileError
from .infrastructure.http.client import Client
from .infrastructure.http.payload import serialize_payload
from .infrastructure.http.response import ResponseScheme, transform_response

__all__ = [
    "AuthenticationConfig",
    "Client",
    "ConfigManager",
    "JiraAgileConfig",
    "JiraAgileError",
    "ResponseScheme",
    "serialize_payload",
    "transform_response",
]
