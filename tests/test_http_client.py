"""Tests for the HTTP client wrapper."""
import pytest
import requests
from unittest.mock import MagicMock
from utils.http_client import HTTPClient, APIError


def make_response(status=200, json_data=None, text=""):
    resp = MagicMock()
    resp.status_code = status
    resp.text = text
    if json_data is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = json_data
    return resp


@pytest.fixture
def client():
    c = HTTPClient("https://api.example.com/", source="example")
    c.session = MagicMock()
    return c


def test_get_builds_url(client):
    client.session.request.return_value = make_response(json_data={"ok": True})
    assert client.get("/v1/thing", params={"a": 1}) == {"ok": True}
    client.session.request.assert_called_once_with(
        "GET", "https://api.example.com/v1/thing", params={"a": 1}, timeout=30,
    )


def test_http_error_raised_once(client):
    client.session.request.return_value = make_response(status=503, text="busy")
    with pytest.raises(APIError) as exc:
        client.get("/x")
    assert exc.value.status_code == 503
    assert exc.value.response_body == "busy"
    assert exc.value.source == "example"
    assert client.session.request.call_count == 1


def test_network_error_wrapped(client):
    client.session.request.side_effect = requests.exceptions.ConnectionError("down")
    with pytest.raises(APIError, match="failed"):
        client.get("/x")
    assert client.session.request.call_count == 1


def test_invalid_json(client):
    client.session.request.return_value = make_response(text="<html>")
    with pytest.raises(APIError, match="Invalid JSON"):
        client.get("/x")


def test_response_cache(client):
    client.cache_ttl = 60
    client.session.request.return_value = make_response(json_data=[1, 2])
    assert client.get("/x") == [1, 2]
    assert client.get("/x") == [1, 2]
    assert client.session.request.call_count == 1
    client.get("/x", params={"page": 2})
    assert client.session.request.call_count == 2


def test_no_cache_by_default(client):
    client.session.request.return_value = make_response(json_data={})
    client.get("/x")
    client.get("/x")
    assert client.session.request.call_count == 2


def test_default_user_agent():
    c = HTTPClient("https://api.example.com")
    assert c.session.headers["User-Agent"].startswith("hashcalc/")
    c.close()
