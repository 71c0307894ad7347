"""Epic endpoints (``/epic``)."""

from typing import Any, Optional, Sequence, Tuple, Union

from jira_agile.infrastructure.http.payload import serialize_payload
from jira_agile.infrastructure.http.response import ResponseScheme

from .base import AgileService, issues_body, page_params, require_key


class EpicService(AgileService):

    def get(self, epic_id_or_key: Union[int, str], destination: Any = dict) -> Tuple[Any, ResponseScheme]:
        key = require_key(epic_id_or_key, "epic_id_or_key")
        return self._execute("GET", f"epic/{key}", destination=destination)

    def issues(
        self,
        epic_id_or_key: Union[int, str],
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        jql: Optional[str] = None,
        validate_query: Optional[bool] = None,
        fields: Optional[Sequence[str]] = None,
        expand: Optional[Sequence[str]] = None,
        destination: Any = dict,
    ) -> Tuple[Any, ResponseScheme]:
        """Issues that belong to the epic."""
        key = require_key(epic_id_or_key, "epic_id_or_key")
        params = page_params(start_at, max_results)
        params.update(jql=jql, validateQuery=validate_query, fields=fields, expand=expand)
        return self._execute("GET", f"epic/{key}/issue", destination=destination, params=params)

    def move(self, epic_id_or_key: Union[int, str], issues: Sequence[str]) -> Tuple[None, ResponseScheme]:
        """Move issues into the epic. At most 50 issues per call."""
        key = require_key(epic_id_or_key, "epic_id_or_key")
        payload = serialize_payload(issues_body(issues))
        return self._execute("POST", f"epic/{key}/issue", payload, destination=None)
