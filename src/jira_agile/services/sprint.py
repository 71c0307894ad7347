"""Sprint endpoints (``/sprint``)."""

from typing import Any, Optional, Sequence, Tuple

from jira_agile.infrastructure.http.payload import serialize_payload
from jira_agile.infrastructure.http.response import ResponseScheme

from .base import AgileService, issues_body, page_params, require_id

SPRINT_STATE_ACTIVE = "active"
SPRINT_STATE_CLOSED = "closed"


class SprintService(AgileService):
    """Sprint lifecycle and sprint issues.

    ``update`` replaces the sprint (PUT) while ``path`` only changes the
    fields present in the payload (POST).
    """

    def get(self, sprint_id: int, destination: Any = dict) -> Tuple[Any, ResponseScheme]:
        return self._execute("GET", f"sprint/{require_id(sprint_id, 'sprint_id')}", destination=destination)

    def create(self, payload: Any, destination: Any = dict) -> Tuple[Any, ResponseScheme]:
        return self._execute("POST", "sprint", serialize_payload(payload), destination=destination)

    def update(self, sprint_id: int, payload: Any, destination: Any = dict) -> Tuple[Any, ResponseScheme]:
        return self._execute(
            "PUT", f"sprint/{require_id(sprint_id, 'sprint_id')}", serialize_payload(payload), destination=destination
        )

    def path(self, sprint_id: int, payload: Any, destination: Any = dict) -> Tuple[Any, ResponseScheme]:
        return self._execute(
            "POST", f"sprint/{require_id(sprint_id, 'sprint_id')}", serialize_payload(payload), destination=destination
        )

    def delete(self, sprint_id: int) -> Tuple[None, ResponseScheme]:
        return self._execute("DELETE", f"sprint/{require_id(sprint_id, 'sprint_id')}", destination=None)

    def start(self, sprint_id: int, destination: Any = dict) -> Tuple[Any, ResponseScheme]:
        """Move a future sprint to active. Jira requires start and end dates to be set."""
        return self.path(sprint_id, {"state": SPRINT_STATE_ACTIVE}, destination=destination)

    def close(self, sprint_id: int, destination: Any = dict) -> Tuple[Any, ResponseScheme]:
        return self.path(sprint_id, {"state": SPRINT_STATE_CLOSED}, destination=destination)

    def issues(
        self,
        sprint_id: int,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        jql: Optional[str] = None,
        validate_query: Optional[bool] = None,
        fields: Optional[Sequence[str]] = None,
        expand: Optional[Sequence[str]] = None,
        destination: Any = dict,
    ) -> Tuple[Any, ResponseScheme]:
        params = page_params(start_at, max_results)
        params.update(jql=jql, validateQuery=validate_query, fields=fields, expand=expand)
        return self._execute(
            "GET", f"sprint/{require_id(sprint_id, 'sprint_id')}/issue", destination=destination, params=params
        )

    def move(self, sprint_id: int, issues: Sequence[str]) -> Tuple[None, ResponseScheme]:
        """Move issues into the sprint. At most 50 issues per call."""
        payload = serialize_payload(issues_body(issues))
        return self._execute(
            "POST", f"sprint/{require_id(sprint_id, 'sprint_id')}/issue", payload, destination=None
        )
