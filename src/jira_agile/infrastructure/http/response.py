"""
Response transformation.

A single routine classifies the HTTP response, drains the body and decodes
it into the caller's destination type, while recording everything needed to
diagnose the call in a ResponseScheme envelope.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, MutableMapping, Optional, Tuple

import requests
from pydantic import TypeAdapter, ValidationError
from requests.structures import CaseInsensitiveDict

from jira_agile.constants import HTTP_SUCCESS_MAX, HTTP_SUCCESS_MIN
from jira_agile.exceptions import (
    BodyReadError,
    DecodeError,
    NilResponseError,
    RequestFailedError,
)

logger = logging.getLogger(__name__)

_BODY_READ_ERRORS = (requests.RequestException, OSError, RuntimeError)


@dataclass
class ResponseScheme:
    """Metadata and raw payload of one completed HTTP call."""

    code: int
    endpoint: str
    method: str
    raw_bytes: bytes = b""
    headers: MutableMapping[str, str] = field(default_factory=CaseInsensitiveDict)

    @property
    def ok(self) -> bool:
        return is_success(self.code)

    @property
    def text(self) -> str:
        return self.raw_bytes.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse the raw body as JSON."""
        return json.loads(self.raw_bytes)


def is_success(status_code: int) -> bool:
    return HTTP_SUCCESS_MIN <= status_code < HTTP_SUCCESS_MAX


def transform_response(
    response: Optional[requests.Response], destination: Optional[Any] = None
) -> Tuple[Any, ResponseScheme]:
    """Turn a raw response into ``(decoded, envelope)``.

    ``destination`` is any type pydantic can validate into (``dict``,
    ``list[int]``, a model class, a dataclass, ``typing.Any``). When it is
    None the body is captured but not decoded and ``decoded`` is None.

    Non-2xx responses raise RequestFailedError. Their body is still drained
    into the envelope so Jira's error payload can be inspected.

    Raises:
        NilResponseError: ``response`` is None.
        RequestFailedError: status code outside [200, 300).
        BodyReadError: the body stream could not be drained.
        DecodeError: the body is not valid JSON for ``destination``.
    """
    if response is None:
        raise NilResponseError()

    try:
        scheme = _build_envelope(response)

        if not is_success(response.status_code):
            scheme.raw_bytes = _drain_failure_body(response)
            logger.warning(
                "%s %s failed with status %d", scheme.method, scheme.endpoint, scheme.code
            )
            raise RequestFailedError(response.status_code, scheme)

        try:
            scheme.raw_bytes = response.content or b""
        except _BODY_READ_ERRORS as e:
            raise BodyReadError(str(e), scheme) from e

        if destination is None:
            return None, scheme

        try:
            decoded = TypeAdapter(destination).validate_json(scheme.raw_bytes)
        except ValidationError as e:
            name = getattr(destination, "__name__", repr(destination))
            raise DecodeError(name, str(e), scheme) from e

        return decoded, scheme
    finally:
        response.close()


def _build_envelope(response: requests.Response) -> ResponseScheme:
    request = response.request
    if request is not None:
        endpoint, method = request.url or "", request.method or ""
    else:
        endpoint, method = response.url or "", ""

    return ResponseScheme(
        code=response.status_code,
        endpoint=endpoint,
        method=method,
        headers=CaseInsensitiveDict(response.headers),
    )


def _drain_failure_body(response: requests.Response) -> bytes:
    # The status code is the primary error here; a broken body must not hide it.
    try:
        return response.content or b""
    except _BODY_READ_ERRORS as e:
        logger.debug("Could not read body of failed response: %s", e)
        return b""
