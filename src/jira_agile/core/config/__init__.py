"""
Configuration package for jira-agile.

- models: pydantic models and environment settings
- manager: TOML + environment loading
"""

from .manager import ConfigManager, default_config_file
from .models import (
    AuthenticationConfig,
    JiraAgileConfig,
    JiraAgileSettings,
    LoggingSettings,
    LogLevel,
)

__all__ = [
    "AuthenticationConfig",
    "ConfigManager",
    "JiraAgileConfig",
    "JiraAgileSettings",
    "LoggingSettings",
    "LogLevel",
    "default_config_file",
]
