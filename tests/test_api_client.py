"""
Tests for UserAdminApiClient: request shapes, response decoding and error messages.
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
import requests

from user_admin.infrastructure.api_client import ApiError, UserAdminApiClient, alert_from_headers


def _response(status: int = 200, body=None, headers: dict | None = None) -> MagicMock:
    r = MagicMock()
    r.status_code = status
    r.headers = headers or {}
    r.content = json.dumps(body).encode() if body is not None else b""
    r.json.return_value = body
    r.raise_for_status = MagicMock()
    return r


@pytest.fixture
def session() -> MagicMock:
    return MagicMock()


@pytest.fixture
def client(session: MagicMock) -> UserAdminApiClient:
    return UserAdminApiClient(base_url="http://api.test/api/", timeout=5, token="", session=session)


def test_list_users_passes_params_and_headers(client: UserAdminApiClient, session: MagicMock) -> None:
    session.request.return_value = _response(body=[{"login": "admin"}], headers={"x-total-count": "1"})

    out = client.list_users({"page": 1, "size": 20, "sort": "id,desc"})

    assert out.data == [{"login": "admin"}]
    assert out.headers["x-total-count"] == "1"
    args, kwargs = session.request.call_args
    assert args == ("GET", "http://api.test/api/users")
    assert kwargs["params"] == {"page": 1, "size": 20, "sort": "id,desc"}
    assert kwargs["timeout"] == 5
    assert "Authorization" not in kwargs["headers"]


def test_list_users_without_params_sends_no_query(client: UserAdminApiClient, session: MagicMock) -> None:
    session.request.return_value = _response(body=[])
    client.list_users({})
    assert session.request.call_args.kwargs["params"] is None


def test_paths_and_methods(client: UserAdminApiClient, session: MagicMock) -> None:
    session.request.return_value = _response(body={"login": "a b"})
    client.get_user("a b")
    client.list_authorities()
    client.create_user({"login": "new"})
    client.update_user({"login": "old"})
    calls = [(c.args, c.kwargs["json"]) for c in session.request.call_args_list]
    assert calls == [
        (("GET", "http://api.test/api/users/a%20b"), None),
        (("GET", "http://api.test/api/users/authorities"), None),
        (("POST", "http://api.test/api/users"), {"login": "new"}),
        (("PUT", "http://api.test/api/users"), {"login": "old"}),
    ]


def test_delete_with_empty_body(client: UserAdminApiClient, session: MagicMock) -> None:
    session.request.return_value = _response(status=204)
    out = client.delete_user("bob")
    assert out.data is None
    assert session.request.call_args.args == ("DELETE", "http://api.test/api/users/bob")


def test_bearer_token(session: MagicMock) -> None:
    session.request.return_value = _response(body=[])
    UserAdminApiClient(base_url="http://x", token="abc", session=session).list_authorities()
    assert session.request.call_args.kwargs["headers"]["Authorization"] == "Bearer abc"


def test_http_error_uses_server_detail(client: UserAdminApiClient, session: MagicMock) -> None:
    err_resp = _response(status=400, body={"title": "Login name already used!"})
    err_resp.raise_for_status.side_effect = requests.exceptions.HTTPError("400", response=err_resp)
    session.request.return_value = err_resp

    with pytest.raises(ApiError) as exc:
        client.create_user({"login": "admin"})
    assert str(exc.value) == "HTTP error 400: Login name already used!"
    assert exc.value.status_code == 400


def test_connection_error(client: UserAdminApiClient, session: MagicMock) -> None:
    session.request.side_effect = requests.exceptions.ConnectionError("refused")
    with pytest.raises(ApiError, match="Connection failed"):
        client.list_users()


def test_timeout(client: UserAdminApiClient, session: MagicMock) -> None:
    session.request.side_effect = requests.exceptions.ReadTimeout("slow")
    with pytest.raises(ApiError, match="timed out after 5 seconds"):
        client.list_users()


def test_invalid_json(client: UserAdminApiClient, session: MagicMock) -> None:
    r = _response(body=None)
    r.content = b"<html>"
    r.json.side_effect = json.JSONDecodeError("bad", "<html>", 0)
    session.request.return_value = r
    with pytest.raises(ApiError, match="Invalid JSON"):
        client.get_user("admin")


def test_alert_from_headers() -> None:
    headers = {"X-usersApp-alert": "A user is updated with identifier bob", "X-usersApp-params": "bob"}
    assert alert_from_headers(headers, app="") == "A user is updated with identifier bob"
    assert alert_from_headers(headers, app="usersApp") == "A user is updated with identifier bob"
    assert alert_from_headers(headers, app="otherApp") is None
    assert alert_from_headers({}, app="") is None
    assert alert_from_headers(None) is None


def test_close_closes_session(client: UserAdminApiClient, session: MagicMock) -> None:
    client.close()
    session.close.assert_called_once_with()
