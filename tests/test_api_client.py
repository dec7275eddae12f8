"""
Spy Cat Agency console.
REST client tests - validates URLs, bodies and failure translation for /api/cats.
"""

import pytest
import requests
from unittest.mock import MagicMock

from spycats.api.client import (
    SpyCatsClient,
    SpyCatsClientError,
    ApiError,
    ApiConnectionError
)
from spycats.api.schemas import SpyCat, SpyCatCreateRequest


def make_response(status_code=200, json_data=None, text=None):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_data is not None:
        response.content = b"{...}"
        response.json.return_value = json_data
        response.text = str(json_data)
    elif text is not None:
        response.content = text.encode()
        response.json.side_effect = ValueError("not json")
        response.text = text
    else:
        response.content = b""
        response.json.side_effect = ValueError("empty")
        response.text = ""
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return SpyCatsClient("http://cats.test/", session=session)


CAT_JSON = {"id": 7, "name": "Agent Whiskers", "years_of_experience": 5, "breed": "Persian", "salary": 50000}


class TestClientRequests:
    """Test request construction for each endpoint."""

    def test_trailing_slash_stripped(self, client):
        assert client.base_url == "http://cats.test"

    def test_list_cats(self, client, session):
        session.request.return_value = make_response(200, [CAT_JSON])

        cats = client.list_cats()

        session.request.assert_called_once_with("GET", "http://cats.test/api/cats")
        assert cats == [SpyCat(**CAT_JSON)]
        assert cats[0].salary == 50000.0

    def test_list_cats_empty(self, client, session):
        session.request.return_value = make_response(200, [])
        assert client.list_cats() == []

    def test_create_cat_posts_all_fields(self, client, session):
        session.request.return_value = make_response(201, CAT_JSON)
        payload = SpyCatCreateRequest(name="Agent Whiskers", years_of_experience=5, breed="Persian", salary=50000)

        cat = client.create_cat(payload)

        session.request.assert_called_once_with(
            "POST",
            "http://cats.test/api/cats",
            json={"name": "Agent Whiskers", "years_of_experience": 5, "breed": "Persian", "salary": 50000.0}
        )
        assert cat.id == 7

    def test_update_salary_sends_only_salary(self, client, session):
        session.request.return_value = make_response(200, {**CAT_JSON, "salary": 65000})

        cat = client.update_salary(7, 65000)

        session.request.assert_called_once_with("PATCH", "http://cats.test/api/cats/7", json={"salary": 65000.0})
        assert cat.salary == 65000.0

    def test_delete_cat(self, client, session):
        session.request.return_value = make_response(204)

        assert client.delete_cat(7) is None
        session.request.assert_called_once_with("DELETE", "http://cats.test/api/cats/7")


class TestClientFailures:
    """Test translation of failed calls into client exceptions."""

    def test_non_2xx_raises_api_error_with_json_payload(self, client, session):
        detail = {"detail": [{"loc": ["body", "breed"], "msg": "invalid breed: 'Sphinx'"}]}
        session.request.return_value = make_response(422, detail)

        with pytest.raises(ApiError) as exc_info:
            client.create_cat(SpyCatCreateRequest(name="A", years_of_experience=1, breed="Sphinx", salary=1))

        assert exc_info.value.status_code == 422
        assert exc_info.value.payload == detail

    def test_non_json_error_body_kept_as_text(self, client, session):
        session.request.return_value = make_response(500, text="Internal Server Error")

        with pytest.raises(ApiError) as exc_info:
            client.list_cats()

        assert exc_info.value.payload == "Internal Server Error"

    def test_empty_error_body(self, client, session):
        session.request.return_value = make_response(409)

        with pytest.raises(ApiError) as exc_info:
            client.delete_cat(3)

        assert exc_info.value.payload is None

    def test_connection_failure(self, client, session):
        session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(ApiConnectionError) as exc_info:
            client.list_cats()

        assert exc_info.value.payload is None
        assert isinstance(exc_info.value, SpyCatsClientError)

    def test_unexpected_record_shape(self, client, session):
        session.request.return_value = make_response(200, {"id": "not-a-number"})

        with pytest.raises(SpyCatsClientError):
            client.update_salary(7, 100)

    def test_non_json_success_body(self, client, session):
        session.request.return_value = make_response(200, text="<html>proxy</html>")

        with pytest.raises(SpyCatsClientError) as exc_info:
            client.list_cats()

        assert not isinstance(exc_info.value, ApiError)
        assert exc_info.value.payload == "<html>proxy</html>"

    def test_default_session_created(self):
        client = SpyCatsClient("http://cats.test")
        assert isinstance(client.session, requests.Session)
        client.close()
