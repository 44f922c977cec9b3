# =============================================================================
# tests/test_web_app.py - Presentation client page
# =============================================================================

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_web.app import create_web_app


def make_client(users=None, error=None):
    api = MagicMock()
    api.list_users.return_value = (users or [], error)
    return TestClient(create_web_app(client=api)), api


def test_index_lists_users():
    client, api = make_client([{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}])

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert '<li data-key="1">Alice</li>' in response.text
    assert '<li data-key="2">Bob</li>' in response.text
    api.list_users.assert_called_once_with()


def test_each_page_load_fetches_again():
    client, api = make_client([{"id": 1, "name": "Alice"}])

    client.get("/")
    client.get("/")

    assert api.list_users.call_count == 2


def test_api_failure_renders_empty_list():
    client, _ = make_client(error={"status_code": None, "message": "refused"})

    response = client.get("/")

    assert response.status_code == 200
    assert '<ul id="users"></ul>' in response.text
    assert "refused" not in response.text


def test_default_client_targets_configured_api(monkeypatch):
    api_cls = MagicMock()
    monkeypatch.setattr("users_web.app.UsersAPI", api_cls)

    create_web_app(settings=Settings(api_base_url="http://api:5000"))

    api_cls.assert_called_once_with(base_url="http://api:5000")
