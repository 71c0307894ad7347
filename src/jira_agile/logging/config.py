"""
Logging configuration for the ``jira_agile`` library logger.

``LoggingConfig`` is what ``configure_logging`` consumes. Applications
normally build it from the validated ``LoggingSettings`` section of the
client configuration rather than by hand.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from jira_agile.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    SERVICE_NAME,
)

FORMAT_TYPES = ("console", "json", "rich")
OUTPUTS = ("console", "file")


class LoggingConfig:
    """Settings applied to the library logger.

    The library stays quiet by default: only warnings and errors from the
    ``jira_agile`` logger reach the console.

    Args:
        level: Level name or number.
        format_type: One of ``FORMAT_TYPES``.
        output: One or more of ``OUTPUTS``.
        file_path: Log file for ``file`` output, ``DEFAULT_LOG_FILE`` when omitted.
        max_file_size: Rotation threshold in bytes.
        backup_count: Rotated files to keep.
        version: Package version stamped on JSON log lines.
    """

    def __init__(
        self,
        level: Union[str, int] = logging.WARNING,
        format_type: str = "console",
        output: Union[str, Sequence[str]] = "console",
        file_path: Optional[Path] = None,
        max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES,
        backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
        version: str = "unknown",
    ):
        if format_type not in FORMAT_TYPES:
            raise ValueError(f"format_type must be one of {', '.join(FORMAT_TYPES)}, got {format_type!r}")

        outputs: List[str] = [output] if isinstance(output, str) else list(output)
        unknown = [o for o in outputs if o not in OUTPUTS]
        if unknown:
            raise ValueError(f"unknown log outputs: {', '.join(unknown)}")

        self.level = _resolve_level(level)
        self.format_type = format_type
        self.output = outputs
        self.file_path = Path(file_path) if file_path is not None else Path(DEFAULT_LOG_FILE)
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.service_name = SERVICE_NAME
        self.version = version

    def __repr__(self) -> str:
        return (
            f"LoggingConfig(level={logging.getLevelName(self.level)}, "
            f"format_type={self.format_type!r}, output={self.output!r})"
        )


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level {level!r}")
    return resolved
