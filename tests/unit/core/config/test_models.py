"""
Unit tests for configuration models.
"""

import logging

import pytest
from pydantic import ValidationError

from jira_agile import __version__
from jira_agile.core.config import (
    AuthenticationConfig,
    JiraAgileConfig,
    JiraAgileSettings,
    LoggingSettings,
    LogLevel,
)


@pytest.mark.unit
class TestAuthenticationConfig:

    def test_empty_config(self):
        auth = AuthenticationConfig()

        assert not auth.basic_auth_provided
        assert not auth.user_agent_provided

    def test_basic_auth(self):
        auth = AuthenticationConfig(mail="me@example.com", token="secret")

        assert auth.basic_auth_provided
        assert auth.token.get_secret_value() == "secret"

    def test_token_is_masked_in_repr(self):
        assert "secret" not in repr(AuthenticationConfig(mail="me@example.com", token="secret"))

    @pytest.mark.parametrize("values", [{"mail": "me@example.com"}, {"token": "secret"}])
    def test_credentials_must_come_together(self, values):
        with pytest.raises(ValidationError, match="Both mail and token"):
            AuthenticationConfig(**values)

    def test_blank_values_count_as_absent(self):
        auth = AuthenticationConfig(mail="  ", token="", user_agent=" ")

        assert not auth.basic_auth_provided
        assert not auth.user_agent_provided

    def test_is_frozen(self):
        auth = AuthenticationConfig(user_agent="bot/1")

        with pytest.raises(ValidationError):
            auth.user_agent = "bot/2"


@pytest.mark.unit
class TestJiraAgileConfig:

    def test_defaults(self):
        config = JiraAgileConfig()

        assert config.site is None
        assert config.timeout is None
        assert config.logging.level == LogLevel.WARNING
        assert not config.auth.basic_auth_provided

    def test_nested_sections(self):
        config = JiraAgileConfig(
            site=" https://example.atlassian.net/rest/agile/1.0 ",
            auth={"mail": "me@example.com", "token": "t", "user_agent": "bot/1"},
            timeout=30,
            logging={"level": "DEBUG", "format": "json"},
        )

        assert config.site == "https://example.atlassian.net/rest/agile/1.0"
        assert config.auth.user_agent == "bot/1"
        assert config.logging.format == "json"

    @pytest.mark.parametrize("site", ["example.atlassian.net", "ftp://example.com"])
    def test_site_must_be_http_url(self, site):
        with pytest.raises(ValidationError, match="absolute http"):
            JiraAgileConfig(site=site)

    @pytest.mark.parametrize("timeout", [0, -1, 301])
    def test_timeout_bounds(self, timeout):
        with pytest.raises(ValidationError):
            JiraAgileConfig(timeout=timeout)


@pytest.mark.unit
class TestLoggingSettings:

    def test_invalid_format(self):
        with pytest.raises(ValidationError, match="format must be one of"):
            LoggingSettings(format="xml")

    def test_invalid_output(self):
        with pytest.raises(ValidationError, match="unknown log outputs"):
            LoggingSettings(output=["console", "syslog"])

    def test_to_logging_config(self, tmp_path):
        settings = LoggingSettings(level="DEBUG", format="json", output=["file"], file_path=tmp_path / "a.log")

        config = settings.to_logging_config()

        assert config.level == logging.DEBUG
        assert config.format_type == "json"
        assert config.output == ["file"]
        assert config.file_path == tmp_path / "a.log"
        assert config.version == __version__


@pytest.mark.unit
class TestJiraAgileSettings:

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("JIRA_AGILE_SITE", "https://env.atlassian.net/rest/agile/1.0")
        monkeypatch.setenv("JIRA_AGILE_TIMEOUT", "15")

        settings = JiraAgileSettings()

        assert settings.site == "https://env.atlassian.net/rest/agile/1.0"
        assert settings.timeout == 15.0
