"""
HTTP request/response pipeline.

Payload serializer -> request builder -> endpoint resolver -> transport ->
response transformer. The request builder and transport live on
``jira_agile.infrastructure.http.client.Client``.
"""

from .endpoint import normalize_site, resolve_endpoint
from .payload import serialize_payload
from .response import ResponseScheme, is_success, transform_response

__all__ = [
    "ResponseScheme",
    "is_success",
    "normalize_site",
    "resolve_endpoint",
    "serialize_payload",
    "transform_response",
]
