"""
Jira Agile HTTP client.

Builds requests against the configured site, sends them through a shared
``requests.Session`` and hands the response to the transformer. Each request
is sent exactly once; retry policy is left to the caller.
"""

import re
import time
from typing import IO, Any, Optional, Tuple

import requests
from requests.auth import HTTPBasicAuth

from jira_agile.constants import HEADER_ACCEPT, HEADER_CONTENT_TYPE, HEADER_USER_AGENT, JSON_MEDIA_TYPE
from jira_agile.core.config.models import AuthenticationConfig, JiraAgileConfig
from jira_agile.exceptions import InvalidConfigurationError, RequestCreationError
from jira_agile.logging import get_logger
from jira_agile.services import BoardService, EpicService, SprintService

from .endpoint import normalize_site, resolve_endpoint
from .response import ResponseScheme, transform_response

# RFC 7230 token characters
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


class Client:
    """Client for the Jira Agile REST API.

    Configuration is fixed at construction; ``site``, ``http``, ``auth`` and
    ``timeout`` are read-only so one client can be shared between threads as
    long as the session is.

    Args:
        site: API base URL, e.g. ``https://example.atlassian.net/rest/agile/1.0``
        http: Session used as transport. A new one is created when omitted.
        auth: Basic-auth credentials and user agent.
        timeout: Default per-request timeout in seconds, None leaves it to
            the transport.
    """

    def __init__(
        self,
        site: str,
        http: Optional[requests.Session] = None,
        auth: Optional[AuthenticationConfig] = None,
        timeout: Optional[float] = None,
    ):
        self._site = normalize_site(site)
        self._owns_session = http is None
        self._http = http if http is not None else requests.Session()
        self._auth = auth or AuthenticationConfig()
        self._timeout = timeout
        self._logger = get_logger(__name__)

        self.board = BoardService(self)
        self.epic = EpicService(self)
        self.sprint = SprintService(self)

    @classmethod
    def from_config(cls, config: JiraAgileConfig, http: Optional[requests.Session] = None) -> "Client":
        """Build a client from a validated configuration."""
        if config.site is None:
            raise InvalidConfigurationError("site", None, "the Jira Agile API base URL")
        return cls(config.site, http=http, auth=config.auth, timeout=config.timeout)

    @property
    def site(self) -> str:
        return self._site

    @property
    def http(self) -> requests.Session:
        return self._http

    @property
    def auth(self) -> AuthenticationConfig:
        return self._auth

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def new_request(self, method: str, path: str, payload: Optional[IO[bytes]] = None) -> requests.PreparedRequest:
        """Build a request for ``path`` relative to the site.

        Args:
            method: HTTP method, case-insensitive.
            path: Path relative to the site, may carry a query string.
            payload: Serialized JSON body, see ``serialize_payload``.

        Raises:
            UrlParseError: ``path`` is malformed.
            RequestCreationError: the request could not be prepared.
        """
        endpoint = resolve_endpoint(self._site, path)

        if not isinstance(method, str) or not _METHOD_TOKEN.fullmatch(method):
            raise RequestCreationError(f"invalid method {method!r}", method=str(method), endpoint=endpoint)
        method = method.upper()

        headers = {HEADER_ACCEPT: JSON_MEDIA_TYPE}
        if payload is not None:
            headers[HEADER_CONTENT_TYPE] = JSON_MEDIA_TYPE
        if self._auth.user_agent_provided:
            headers[HEADER_USER_AGENT] = self._auth.user_agent

        basic_auth = None
        if self._auth.basic_auth_provided:
            basic_auth = HTTPBasicAuth(self._auth.mail, self._auth.token.get_secret_value())

        request = requests.Request(method, endpoint, headers=headers, data=payload, auth=basic_auth)
        try:
            return self._http.prepare_request(request)
        except (requests.RequestException, ValueError, TypeError) as e:
            raise RequestCreationError(str(e), method=method, endpoint=endpoint) from e

    def call(
        self,
        request: requests.PreparedRequest,
        destination: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[Any, ResponseScheme]:
        """Send ``request`` once and transform the response.

        Transport errors (``requests.ConnectionError``, ``requests.Timeout``,
        ...) propagate unchanged. See ``transform_response`` for the
        response-side errors.
        """
        log = self._logger.with_context(method=request.method, endpoint=request.url)
        log.debug(f"{request.method} {request.url}")

        start_time = time.perf_counter()
        try:
            response = self._http.send(
                request,
                stream=True,
                timeout=timeout if timeout is not None else self._timeout,
            )
        except requests.RequestException as e:
            log.warning(f"Transport failure: {type(e).__name__}: {e}")
            raise

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        log.debug(f"Response: {response.status_code}", status_code=response.status_code, duration=duration_ms)

        return transform_response(response, destination)

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(site={self._site!r})"
