"""
Unit tests for the board service.
"""

import json

import pytest

from jira_agile.exceptions import RequestFailedError, StructureNotProvidedError

BASE = "https://example.atlassian.net/rest/agile/1.0/"


def _sent(send):
    return send.call_args[0][0]


@pytest.mark.unit
class TestBoardService:

    def test_get(self, client, respond):
        send = respond(200, b'{"id": 1, "name": "PRJ board"}')

        board, response = client.board.get(1)

        assert board == {"id": 1, "name": "PRJ board"}
        assert response.code == 200
        assert _sent(send).method == "GET"
        assert _sent(send).url == BASE + "board/1"

    def test_get_missing_board(self, client, respond):
        respond(404, b'{"errorMessages":["Board does not exist"]}')

        with pytest.raises(RequestFailedError) as exc_info:
            client.board.get(99)

        assert exc_info.value.response.code == 404
        assert exc_info.value.response.endpoint == BASE + "board/99"

    def test_get_rejects_bad_id(self, client, session):
        with pytest.raises(ValueError):
            client.board.get(0)

        session.send.assert_not_called()

    def test_create(self, client, respond):
        send = respond(201, b'{"id": 84}')
        payload = {"name": "New board", "type": "scrum", "filterId": 10040}

        board, _ = client.board.create(payload)

        request = _sent(send)
        assert board == {"id": 84}
        assert request.method == "POST"
        assert request.url == BASE + "board"
        assert json.loads(request.body.read()) == payload

    def test_create_without_payload(self, client, session):
        with pytest.raises(StructureNotProvidedError):
            client.board.create(None)

        session.send.assert_not_called()

    def test_delete(self, client, respond):
        send = respond(204)

        result, response = client.board.delete(4)

        assert result is None
        assert response.code == 204
        assert _sent(send).method == "DELETE"
        assert _sent(send).url == BASE + "board/4"

    def test_configuration(self, client, respond):
        send = respond(200, b'{"id": 1, "columnConfig": {}}')

        client.board.configuration(1)

        assert _sent(send).url == BASE + "board/1/configuration"

    def test_backlog_query(self, client, respond):
        send = respond(200, b'{"issues": []}')

        client.board.backlog(1, start_at=0, max_results=50, jql="project = PRJ", fields=["summary", "status"])

        assert _sent(send).url == (
            BASE + "board/1/backlog?startAt=0&maxResults=50&jql=project+%3D+PRJ&fields=summary%2Cstatus"
        )

    def test_issues_without_options(self, client, respond):
        send = respond(200, b'{"issues": []}')

        client.board.issues(1)

        assert _sent(send).url == BASE + "board/1/issue"

    def test_epics(self, client, respond):
        send = respond(200, b'{"values": []}')

        client.board.epics(1, done=False)

        assert _sent(send).url == BASE + "board/1/epic?done=false"

    def test_sprints_by_state(self, client, respond):
        send = respond(200, b'{"values": [{"id": 3, "state": "active"}]}')

        sprints, _ = client.board.sprints(1, max_results=10, states=["active", "future"])

        assert sprints["values"][0]["id"] == 3
        assert _sent(send).url == BASE + "board/1/sprint?maxResults=10&state=active%2Cfuture"

    def test_projects(self, client, respond):
        send = respond(200, b'{"values": []}')

        client.board.projects(1, start_at=50)

        assert _sent(send).url == BASE + "board/1/project?startAt=50"

    def test_versions(self, client, respond):
        send = respond(200, b'{"values": []}')

        client.board.versions(1, released=True)

        assert _sent(send).url == BASE + "board/1/version?released=true"

    def test_filter(self, client, respond):
        send = respond(200, b'{"values": []}')

        client.board.filter(10040)

        assert _sent(send).url == BASE + "board/filter/10040"

    def test_custom_destination(self, client, respond):
        respond(200, b'{"id": 1, "name": "PRJ board"}')

        raw, response = client.board.get(1, destination=None)

        assert raw is None
        assert response.json()["name"] == "PRJ board"
