"""
Configuration models for jira-agile.

Pydantic-based models that provide validation and type safety for the
client configuration, plus the environment-backed settings.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_agile import __version__
from jira_agile.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    ENV_PREFIX,
    MAX_TIMEOUT_SECONDS,
    MIN_LOG_FILE_SIZE_BYTES,
)
from jira_agile.logging import FORMAT_TYPES, OUTPUTS, LoggingConfig


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class AuthenticationConfig(BaseModel):
    """Basic-auth credentials and user agent, read on every request."""

    model_config = ConfigDict(frozen=True)

    mail: Optional[str] = Field(None, description="Atlassian account e-mail")
    token: Optional[SecretStr] = Field(None, description="Atlassian API token")
    user_agent: Optional[str] = Field(None, description="Custom User-Agent header")

    @field_validator("mail", "user_agent", mode="before")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and len(v.strip()) == 0:
            return None
        return v

    @field_validator("token", mode="before")
    @classmethod
    def blank_token_to_none(cls, v):
        if isinstance(v, str) and len(v.strip()) == 0:
            return None
        return v

    @model_validator(mode="after")
    def validate_credentials_together(self) -> "AuthenticationConfig":
        if (self.mail is None) != (self.token is None):
            raise ValueError("Both mail and token must be provided together")
        return self

    @property
    def basic_auth_provided(self) -> bool:
        return self.mail is not None and self.token is not None

    @property
    def user_agent_provided(self) -> bool:
        return self.user_agent is not None


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in FORMAT_TYPES:
            raise ValueError(f"format must be one of: {', '.join(FORMAT_TYPES)}")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        unknown = [o for o in v if o not in OUTPUTS]
        if unknown:
            raise ValueError(f"unknown log outputs: {', '.join(unknown)}")
        return v

    def to_logging_config(self) -> LoggingConfig:
        return LoggingConfig(
            level=self.level.value,
            format_type=self.format,
            output=list(self.output),
            file_path=self.file_path,
            max_file_size=self.max_file_size,
            backup_count=self.backup_count,
            version=__version__,
        )


class JiraAgileConfig(BaseModel):
    """Complete client configuration."""

    site: Optional[str] = Field(None, description="Jira Agile API base URL")
    auth: AuthenticationConfig = Field(default_factory=AuthenticationConfig)
    timeout: Optional[float] = Field(
        None, gt=0, le=MAX_TIMEOUT_SECONDS, description="Per-request timeout in seconds"
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("site")
    @classmethod
    def validate_site(cls, v: Optional[str]) -> Optional[str]:
        if v is None or len(v.strip()) == 0:
            return None
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("site must be an absolute http(s) URL")
        return v


class JiraAgileSettings(BaseSettings):
    """Environment variable overrides, all prefixed with JIRA_AGILE_."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )

    site: Optional[str] = None
    mail: Optional[str] = None
    token: Optional[str] = None
    user_agent: Optional[str] = None
    timeout: Optional[float] = None
    log_level: Optional[str] = None
    log_format: Optional[str] = None
