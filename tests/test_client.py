"""Search client with a mocked requests session."""

from unittest.mock import Mock

import requests

from supergooalros_client import SupergooalrosClient


def _response(status_code=200, payload=None):
    response = Mock()
    response.status_code = status_code
    response.content = b"[]" if payload is None else b"x"
    response.json.return_value = payload if payload is not None else []
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


def test_query_issues_get_against_search_endpoint():
    session = Mock()
    session.request.return_value = _response(payload=[{"id": 1, "leave_type": "ANNUEL"}])
    client = SupergooalrosClient(base_url="http://api.local/", session=session)

    items, error = client.conge_search.query("annuel")

    assert error is None
    assert items == [{"id": 1, "leave_type": "ANNUEL"}]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://api.local/api/_search/conges"
    assert kwargs["params"] == {"query": "annuel"}
    assert "Authorization" not in kwargs["headers"]


def test_query_passes_paging_and_api_key():
    session = Mock()
    session.request.return_value = _response(payload=[])
    client = SupergooalrosClient(base_url="http://api.local", api_key="secret", session=session)

    client.absence_search.query("*", page=2, size=5)

    kwargs = session.request.call_args.kwargs
    assert kwargs["url"] == "http://api.local/api/_search/absences"
    assert kwargs["params"] == {"query": "*", "page": 2, "size": 5}
    assert kwargs["headers"]["Authorization"] == "Bearer secret"


def test_query_reports_http_errors():
    session = Mock()
    session.request.return_value = _response(status_code=422, payload={"detail": "query required"})
    client = SupergooalrosClient(base_url="http://api.local", session=session)

    items, error = client.absence_search.query("")

    assert items == []
    assert error == {"status_code": 422, "message": "query required"}


def test_query_reports_connection_errors():
    session = Mock()
    session.request.side_effect = requests.ConnectionError("refused")
    client = SupergooalrosClient(base_url="http://api.local", session=session)

    items, error = client.conge_search.query("annuel")

    assert items == []
    assert error["status_code"] is None
    assert "refused" in error["message"]
