"""
Per-resource services of the Jira Agile API.

Each service only knows its endpoint paths; requests go through the client's
shared request/response pipeline.
"""

from .base import AgileService, build_query
from .board import BoardService
from .epic import EpicService
from .sprint import SprintService

__all__ = [
    "AgileService",
    "BoardService",
    "EpicService",
    "SprintService",
    "build_query",
]
