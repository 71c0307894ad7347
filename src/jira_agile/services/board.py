"""Board endpoints (``/board``)."""

from typing import Any, Optional, Sequence, Tuple

from jira_agile.infrastructure.http.payload import serialize_payload
from jira_agile.infrastructure.http.response import ResponseScheme

from .base import AgileService, page_params, require_id


class BoardService(AgileService):
    """Boards, their backlog and everything hanging off them."""

    def get(self, board_id: int, destination: Any = dict) -> Tuple[Any, ResponseScheme]:
        return self._execute("GET", f"board/{require_id(board_id, 'board_id')}", destination=destination)

    def create(self, payload: Any, destination: Any = dict) -> Tuple[Any, ResponseScheme]:
        """Create a board from a name, type and filter id."""
        return self._execute("POST", "board", serialize_payload(payload), destination=destination)

    def delete(self, board_id: int) -> Tuple[None, ResponseScheme]:
        return self._execute("DELETE", f"board/{require_id(board_id, 'board_id')}", destination=None)

    def configuration(self, board_id: int, destination: Any = dict) -> Tuple[Any, ResponseScheme]:
        return self._execute(
            "GET", f"board/{require_id(board_id, 'board_id')}/configuration", destination=destination
        )

    def backlog(
        self,
        board_id: int,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        jql: Optional[str] = None,
        validate_query: Optional[bool] = None,
        fields: Optional[Sequence[str]] = None,
        expand: Optional[Sequence[str]] = None,
        destination: Any = dict,
    ) -> Tuple[Any, ResponseScheme]:
        """Issues in the board backlog, in rank order."""
        params = page_params(start_at, max_results)
        params.update(jql=jql, validateQuery=validate_query, fields=fields, expand=expand)
        return self._execute(
            "GET", f"board/{require_id(board_id, 'board_id')}/backlog", destination=destination, params=params
        )

    def issues(
        self,
        board_id: int,
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
            "GET", f"board/{require_id(board_id, 'board_id')}/issue", destination=destination, params=params
        )

    def epics(
        self,
        board_id: int,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        done: Optional[bool] = None,
        destination: Any = dict,
    ) -> Tuple[Any, ResponseScheme]:
        params = page_params(start_at, max_results)
        params["done"] = done
        return self._execute(
            "GET", f"board/{require_id(board_id, 'board_id')}/epic", destination=destination, params=params
        )

    def sprints(
        self,
        board_id: int,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        states: Optional[Sequence[str]] = None,
        destination: Any = dict,
    ) -> Tuple[Any, ResponseScheme]:
        """Sprints of a scrum board, optionally filtered by state (future, active, closed)."""
        params = page_params(start_at, max_results)
        params["state"] = states
        return self._execute(
            "GET", f"board/{require_id(board_id, 'board_id')}/sprint", destination=destination, params=params
        )

    def projects(
        self,
        board_id: int,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        destination: Any = dict,
    ) -> Tuple[Any, ResponseScheme]:
        return self._execute(
            "GET",
            f"board/{require_id(board_id, 'board_id')}/project",
            destination=destination,
            params=page_params(start_at, max_results),
        )

    def versions(
        self,
        board_id: int,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        released: Optional[bool] = None,
        destination: Any = dict,
    ) -> Tuple[Any, ResponseScheme]:
        params = page_params(start_at, max_results)
        params["released"] = released
        return self._execute(
            "GET", f"board/{require_id(board_id, 'board_id')}/version", destination=destination, params=params
        )

    def filter(
        self,
        filter_id: int,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        destination: Any = dict,
    ) -> Tuple[Any, ResponseScheme]:
        """Boards that use the given saved filter."""
        return self._execute(
            "GET",
            f"board/filter/{require_id(filter_id, 'filter_id')}",
            destination=destination,
            params=page_params(start_at, max_results),
        )
