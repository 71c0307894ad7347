"""
Logger wrapper that attaches a correlation ID and structured context.
"""

import logging
from typing import Any, Dict, Optional
from uuid import uuid4


class AgileLogger:
    """Logger with correlation tracking and persistent context."""

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())
        self.extra_context: Dict[str, Any] = {}

    def _log(self, level: int, msg: str, duration: Optional[float] = None, exc_info: bool = False, **kwargs):
        """Internal logging method with correlation ID and context."""
        if not self.logger.isEnabledFor(level):
            return

        extra: Dict[str, Any] = {"correlation_id": self.correlation_id}
        context = {**self.extra_context, **kwargs}
        if context:
            extra["extra_context"] = context
        if duration is not None:
            extra["duration"] = duration

        self.logger.log(level, msg, extra=extra, exc_info=exc_info)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log exception with traceback."""
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def with_context(self, **kwargs) -> "AgileLogger":
        """Create a copy of this logger with additional context."""
        new_logger = AgileLogger(self.logger.name, self.correlation_id)
        new_logger.extra_context = {**self.extra_context, **kwargs}
        return new_logger


def get_logger(name: str, correlation_id: Optional[str] = None) -> AgileLogger:
    """Get an AgileLogger instance."""
    return AgileLogger(name, correlation_id)
