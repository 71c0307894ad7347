"""Core configuration for jira-agile."""
