"""
Unit tests for the jira-agile exception system.
"""

import pytest

from jira_agile.exceptions import (
    BodyReadError,
    ConfigurationError,
    ConfigurationValidationError,
    DecodeError,
    ExceptionContext,
    InvalidConfigurationError,
    JiraAgileError,
    NilResponseError,
    RequestCreationError,
    RequestError,
    RequestFailedError,
    ResponseError,
    SerializationError,
    StructureNotProvidedError,
    UrlParseError,
)
from jira_agile.infrastructure.http.response import ResponseScheme


def _scheme(code=404, raw_bytes=b""):
    return ResponseScheme(
        code=code,
        endpoint="https://example.atlassian.net/rest/agile/1.0/board/1",
        method="GET",
        raw_bytes=raw_bytes,
    )


@pytest.mark.unit
class TestJiraAgileError:
    """Test the base JiraAgileError class."""

    def test_basic_error_creation(self):
        error = JiraAgileError("Test error message", help_text="Test help text")

        error_str = str(error)
        assert "Test error message" in error_str
        assert "💡 Help: Test help text" in error_str
        assert "🔍 Error ID:" in error_str
        assert error.help_text == "Test help text"
        assert error.error_code is None

    def test_error_with_context_object(self):
        context = ExceptionContext(
            help_text="Help",
            error_code="TEST_001",
            context={"board": 1},
            user_action="Retry",
            correlation_id="abcd1234",
        )

        error = JiraAgileError("Boom", context)

        assert error.error_code == "TEST_001"
        assert error.correlation_id == "abcd1234"
        assert "📋 Context: board: 1" in str(error)
        assert "🔧 Action: Retry" in str(error)

    def test_context_dict_is_copied(self):
        context = ExceptionContext(context={"a": 1})

        JiraAgileError("x", context).add_context(b=2)

        assert context.context == {"a": 1}

    def test_error_without_help(self):
        error = JiraAgileError("Test error")

        assert "💡 Help:" not in str(error)
        assert len(error.correlation_id) == 8

    def test_error_representation(self):
        assert repr(JiraAgileError("Test message")) == "JiraAgileError('Test message')"

    def test_to_dict(self):
        error = JiraAgileError("Test", error_code="CODE_001").add_context(board=1)

        data = error.to_dict()

        assert data["error_type"] == "JiraAgileError"
        assert data["message"] == "Test"
        assert data["error_code"] == "CODE_001"
        assert data["context"] == {"board": 1}
        assert "timestamp" in data

    def test_error_chaining(self):
        original_error = ValueError("Original error")

        with pytest.raises(JiraAgileError) as exc_info:
            raise JiraAgileError("Wrapped") from original_error

        assert exc_info.value.__cause__ is original_error


@pytest.mark.unit
class TestHierarchy:

    @pytest.mark.parametrize(
        "error",
        [
            UrlParseError("board/%zz", "invalid escape"),
            StructureNotProvidedError(),
            SerializationError("dict", "bad"),
            RequestCreationError("bad method"),
        ],
    )
    def test_request_errors(self, error):
        assert isinstance(error, RequestError)
        assert isinstance(error, JiraAgileError)

    @pytest.mark.parametrize(
        "error",
        [
            NilResponseError(),
            RequestFailedError(500),
            BodyReadError("reset"),
            DecodeError("dict", "bad json"),
        ],
    )
    def test_response_errors(self, error):
        assert isinstance(error, ResponseError)
        assert isinstance(error, JiraAgileError)

    def test_configuration_errors(self):
        assert isinstance(InvalidConfigurationError("site", None, "URL"), ConfigurationError)
        assert isinstance(ConfigurationValidationError(["x"]), ConfigurationError)


@pytest.mark.unit
class TestRequestErrors:

    def test_url_parse_error(self):
        error = UrlParseError("board/%zz", "invalid percent-encoded escape in URL")

        assert error.message == "URL parsing failed: invalid percent-encoded escape in URL"
        assert error.context["url"] == "board/%zz"
        assert error.error_code == "REQUEST_001"

    def test_structure_not_provided(self):
        assert "No payload structure was provided" in StructureNotProvidedError().message

    def test_request_creation_error(self):
        error = RequestCreationError("invalid method 'GE T'", method="GE T", endpoint="https://x/board")

        assert error.message == "Request creation failed: invalid method 'GE T'"
        assert error.context == {"method": "GE T", "endpoint": "https://x/board"}


@pytest.mark.unit
class TestRequestFailedError:

    def test_message_carries_status(self):
        error = RequestFailedError(404, _scheme())

        assert error.status_code == 404
        assert error.message.endswith("Status Code: 404")
        assert error.context["status_code"] == 404
        assert error.context["endpoint"].endswith("board/1")
        assert error.context["method"] == "GET"

    def test_jira_error_messages_are_parsed(self):
        error = RequestFailedError(
            400,
            _scheme(400, b'{"errorMessages":["Bad JQL"],"errors":{"startDate":"Invalid date"}}'),
        )

        assert error.error_messages == ["Bad JQL"]
        assert error.errors == {"startDate": "Invalid date"}
        assert error.technical_details == "Bad JQL; startDate: Invalid date"

    def test_help_for_known_status(self):
        assert "credentials" in RequestFailedError(401).help_text
        assert "rate limited" in RequestFailedError(429).help_text

    def test_help_falls_back_for_server_errors(self):
        assert RequestFailedError(504).help_text == RequestFailedError(500).help_text

    def test_no_help_for_unknown_status(self):
        assert RequestFailedError(418).help_text is None

    def test_without_response(self):
        error = RequestFailedError(503)

        assert error.response is None
        assert error.error_messages == []
        assert "endpoint" not in error.context

    @pytest.mark.parametrize("body", [b"[1, 2]", b'{"errorMessages": "nope"}', b"not json"])
    def test_unexpected_error_bodies(self, body):
        error = RequestFailedError(400, _scheme(400, body))

        assert error.error_messages == []
        assert error.errors == {}
        assert error.technical_details is None


@pytest.mark.unit
class TestConfigurationErrors:

    def test_invalid_configuration_error(self):
        error = InvalidConfigurationError("timeout", -1, "a positive number")

        assert error.field == "timeout"
        assert error.message == "Invalid configuration for 'timeout': got -1, expected a positive number"
        assert error.error_code == "CONFIG_001"

    def test_validation_error_lists_problems(self):
        error = ConfigurationValidationError(["site: bad", "timeout: too large"])

        assert error.errors == ["site: bad", "timeout: too large"]
        assert "\n  - site: bad" in error.message
        assert "\n  - timeout: too large" in error.message
