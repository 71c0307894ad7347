"""
Centralized logging configuration and management.

Provides the LoggingManager singleton for configuring and managing loggers.
"""

import logging
import logging.handlers
import sys
from typing import List, Optional

from .config import LoggingConfig
from .formatters import (
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
)
from .loggers import AgileLogger

LIBRARY_LOGGER = "jira_agile"


class LoggingManager:
    """Centralized logging configuration and management.

    Handlers are attached to the ``jira_agile`` logger, never to the root
    logger, so an application embedding the library keeps its own setup.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config: Optional[LoggingConfig] = None
            self.handlers: List[logging.Handler] = []
            self._initialized = True

    def configure(self, config: LoggingConfig):
        """Configure the logging system."""
        self.config = config

        library_logger = logging.getLogger(LIBRARY_LOGGER)
        for handler in self.handlers:
            library_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

        library_logger.setLevel(config.level)
        library_logger.propagate = False

        for output in config.output:
            if output == "console":
                self._add_console_handler(config)
            elif output == "file":
                self._add_file_handler(config)

    def _add_console_handler(self, config: LoggingConfig):
        """Add console handler."""
        if config.format_type == "rich":
            handler = create_rich_handler()
            handler.setFormatter(logging.Formatter("%(message)s"))
        elif config.format_type == "json":
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                StructuredFormatter(config.service_name, config.version)
            )
        else:  # console format
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(create_console_formatter())

        self._register(handler, config)

    def _add_file_handler(self, config: LoggingConfig):
        """Add file handler with rotation."""
        config.file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )

        if config.format_type == "json":
            handler.setFormatter(
                StructuredFormatter(config.service_name, config.version)
            )
        else:
            handler.setFormatter(create_console_formatter())

        self._register(handler, config)

    def _register(self, handler: logging.Handler, config: LoggingConfig):
        handler.setLevel(config.level)
        logging.getLogger(LIBRARY_LOGGER).addHandler(handler)
        self.handlers.append(handler)

    def get_logger(
        self, name: str, correlation_id: Optional[str] = None
    ) -> AgileLogger:
        """Get a jira-agile logger instance."""
        return AgileLogger(name, correlation_id)


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
