from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from requests import Response
from requests.exceptions import ConnectionError as RequestsConnectionError

from ecbrates.providers.http_client import HTTPClient, HTTPClientConfig, HTTPClientError


def make_response(status_code: int, content: bytes = b"") -> Response:
    resp = MagicMock(spec=Response)
    resp.status_code = status_code
    resp.text = "error"
    resp.content = content
    return resp


def test_http_client_returns_body():
    session = MagicMock()
    client = HTTPClient(config=HTTPClientConfig(base_url="https://example.com/feeds/"), session=session)
    session.get.return_value = make_response(200, b"<xml/>")

    payload = client.get("/daily.xml")

    assert payload == b"<xml/>"
    session.get.assert_called_once_with("https://example.com/feeds/daily.xml", params=None, timeout=None)


def test_http_client_makes_single_attempt_by_default(monkeypatch):
    session = MagicMock()
    client = HTTPClient(config=HTTPClientConfig(base_url="https://example.com"), session=session)
    session.get.side_effect = RequestsConnectionError("connection refused")
    sleeps: list[float] = []
    monkeypatch.setattr("time.sleep", sleeps.append)

    with pytest.raises(HTTPClientError) as exc_info:
        client.get("/daily.xml")

    assert "connection refused" in str(exc_info.value)
    assert session.get.call_count == 1
    assert sleeps == []


def test_http_client_reports_http_errors():
    session = MagicMock()
    client = HTTPClient(config=HTTPClientConfig(base_url="https://example.com"), session=session)
    session.get.return_value = make_response(404)

    with pytest.raises(HTTPClientError) as exc_info:
        client.get("/missing.xml")

    assert "Client error 404" in str(exc_info.value)


def test_http_client_retries_when_configured(monkeypatch):
    session = MagicMock()
    config = HTTPClientConfig(base_url="https://example.com", max_retries=2, backoff_seconds=0)
    client = HTTPClient(config=config, session=session)
    session.get.side_effect = [make_response(500), make_response(200, b"ok")]

    monkeypatch.setattr("time.sleep", lambda *_: None)
    monkeypatch.setattr("random.uniform", lambda *_: 0)

    assert client.get("/data") == b"ok"
    assert session.get.call_count == 2


def test_http_client_raises_after_retries_exhausted(monkeypatch):
    session = MagicMock()
    config = HTTPClientConfig(base_url="https://example.com", max_retries=2, backoff_seconds=0)
    client = HTTPClient(config=config, session=session)
    session.get.return_value = make_response(500)

    monkeypatch.setattr("time.sleep", lambda *_: None)

    with pytest.raises(HTTPClientError) as exc_info:
        client.get("/data")

    assert "Failed to fetch" in str(exc_info.value)
    assert exc_info.value.status_code is None
    assert session.get.call_count == 2
