"""
jira-agile Logging Package

- formatters: Log formatting (JSON, console, rich)
- loggers: Logger wrapper with correlation IDs
- config: Logging configuration
- manager: Centralized logging setup and management
"""

from .config import FORMAT_TYPES, OUTPUTS, LoggingConfig
from .formatters import StructuredFormatter
from .loggers import AgileLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "FORMAT_TYPES",
    "LoggingConfig",
    "OUTPUTS",
    "LoggingManager",
    "configure_logging",
    "AgileLogger",
    "get_logger",
    "StructuredFormatter",
]
