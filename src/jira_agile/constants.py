"""
Library-wide constants for jira-agile.

This module contains magic numbers and protocol constants that are used
throughout the library to improve maintainability and reduce duplication.
"""

SERVICE_NAME = "jira-agile"

# HTTP success range, lower bound inclusive and upper bound exclusive
HTTP_SUCCESS_MIN = 200
HTTP_SUCCESS_MAX = 300

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"
JSON_MEDIA_TYPE = "application/json"

# Configuration
ENV_PREFIX = "JIRA_AGILE_"
CONFIG_DIR_NAME = "jira-agile"
CONFIG_FILE_NAME = "config.toml"
MAX_TIMEOUT_SECONDS = 300

# Logging
DEFAULT_LOG_FILE = "logs/jira-agile.log"
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5
