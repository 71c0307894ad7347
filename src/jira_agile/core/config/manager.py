"""
Configuration manager for jira-agile.

Loads a TOML file, applies JIRA_AGILE_* environment overrides and validates
the result into a JiraAgileConfig.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from jira_agile.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from jira_agile.exceptions.config import (
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .models import JiraAgileConfig, JiraAgileSettings


def default_config_file() -> Path:
    """Standard per-user configuration file location."""
    return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class ConfigManager:
    """Configuration loader with file and environment sources.

    Environment variables win over the file. The validated configuration is
    cached after the first load.
    """

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else default_config_file()
        self._config: Optional[JiraAgileConfig] = None

    def load_config(self) -> JiraAgileConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = JiraAgileConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                [_format_validation_error(err) for err in e.errors()]
            ) from e

        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e
        except OSError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Unreadable file: {e}", "a readable TOML file"
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = JiraAgileSettings()

        config_data.setdefault("auth", {})
        config_data.setdefault("logging", {})

        if settings.site:
            config_data["site"] = settings.site
        if settings.timeout is not None:
            config_data["timeout"] = settings.timeout

        auth = config_data["auth"]
        if settings.mail:
            auth["mail"] = settings.mail
        if settings.token:
            auth["token"] = settings.token
        if settings.user_agent:
            auth["user_agent"] = settings.user_agent

        logging_section = config_data["logging"]
        if settings.log_level:
            logging_section["level"] = settings.log_level.upper()
        if settings.log_format:
            logging_section["format"] = settings.log_format

        return config_data

    def reload(self) -> JiraAgileConfig:
        """Drop the cached configuration and load it again."""
        self._config = None
        return self.load_config()


def _format_validation_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())) or "config"
    return f"{location}: {error.get('msg', 'invalid value')}"
