"""
Pytest configuration and shared fixtures for jira-agile tests.
"""

import io
import logging
from unittest.mock import Mock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from jira_agile.core.config import AuthenticationConfig
from jira_agile.infrastructure.http.client import Client

SITE = "https://example.atlassian.net/rest/agile/1.0/"


def _make_response(
    status_code=200,
    body=b"",
    method="GET",
    url=SITE + "board/1",
    headers=None,
):
    """Build a real requests.Response whose body is streamed from memory."""
    response = requests.Response()
    response.status_code = status_code
    response.headers = CaseInsensitiveDict(
        headers if headers is not None else {"Content-Type": "application/json"}
    )
    response.raw = io.BytesIO(body)
    response.url = url
    response.request = requests.Request(method, url).prepare()
    return response


@pytest.fixture
def site():
    return SITE


@pytest.fixture
def make_response():
    """Factory fixture for in-memory responses."""
    return _make_response


@pytest.fixture
def auth():
    return AuthenticationConfig(mail="me@example.com", token="secret-token", user_agent="jira-agile-tests/1.0")


@pytest.fixture
def session():
    """A real session whose transport is replaced by a mock."""
    session = requests.Session()
    session.send = Mock()
    return session


@pytest.fixture
def client(session, auth):
    return Client(SITE, http=session, auth=auth)


@pytest.fixture
def respond(session, make_response):
    """Make the mocked transport answer with the given status and body."""

    def _respond(status_code=200, body=b"", headers=None):
        def send(request, **kwargs):
            return make_response(
                status_code=status_code,
                body=body,
                method=request.method,
                url=request.url,
                headers=headers,
            )

        session.send.side_effect = send
        return session.send

    return _respond


@pytest.fixture(autouse=True)
def reset_library_logger():
    """Undo any handler setup a test left on the jira_agile logger."""
    yield
    from jira_agile.logging.manager import LIBRARY_LOGGER, logging_manager

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in logging_manager.handlers:
        library_logger.removeHandler(handler)
        handler.close()
    logging_manager.handlers.clear()
    logging_manager.config = None
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True
