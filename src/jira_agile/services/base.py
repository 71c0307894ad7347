"""
Shared plumbing for the per-resource services.
"""

from typing import IO, TYPE_CHECKING, Any, Dict, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode

from jira_agile.infrastructure.http.response import ResponseScheme

if TYPE_CHECKING:
    from jira_agile.infrastructure.http.client import Client


class AgileService:
    """Base class holding the back-reference to the client."""

    def __init__(self, client: "Client"):
        self._client = client

    def _execute(
        self,
        method: str,
        path: str,
        payload: Optional[IO[bytes]] = None,
        destination: Optional[Any] = dict,
        params: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Any, ResponseScheme]:
        query = build_query(params or {})
        if query:
            path = f"{path}?{query}"
        request = self._client.new_request(method, path, payload)
        return self._client.call(request, destination)


def build_query(params: Dict[str, Any]) -> str:
    """Encode query parameters the way Jira expects them.

    None values are skipped, booleans become ``true``/``false`` and
    sequences are comma-joined.
    """
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (list, tuple, set, frozenset)):
            if not value:
                continue
            value = ",".join(str(v) for v in value)
        pairs.append((key, value))
    return urlencode(pairs)


def page_params(start_at: Optional[int], max_results: Optional[int]) -> Dict[str, Any]:
    """Query parameters for the offset-based listing endpoints."""
    if start_at is not None and (isinstance(start_at, bool) or start_at < 0):
        raise ValueError(f"start_at must be a non-negative integer, got {start_at!r}")
    if max_results is not None and (isinstance(max_results, bool) or max_results < 1):
        raise ValueError(f"max_results must be a positive integer, got {max_results!r}")
    return {"startAt": start_at, "maxResults": max_results}


def require_id(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


def require_key(value: Union[int, str], name: str) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(require_id(value, name))
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a positive integer or a non-blank key, got {value!r}")
    return value.strip()


def issues_body(issues: Sequence[str]) -> Dict[str, Any]:
    """Body for the move-issues endpoints."""
    if isinstance(issues, str) or not issues:
        raise ValueError("issues must be a non-empty sequence of issue keys or ids")
    return {"issues": [str(issue) for issue in issues]}
