"""jira-agile command-line interface."""

from jira_agile import __version__

__all__ = ["__version__"]
