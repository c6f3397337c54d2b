"""Smoke tests for the health endpoint and API docs."""

from __future__ import annotations


def test_health_endpoint_returns_ok(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "app": "ecb-rates", "provider": "ecb"}


def test_health_endpoint_reports_mock_provider(mock_provider_app):
    response = mock_provider_app.test_client().get("/health")
    assert response.get_json()["provider"] == "mock"


def test_openapi_document_lists_rate_routes(client):
    response = client.get("/docs/openapi.json")
    assert response.status_code == 200
    paths = response.get_json()["paths"]
    assert {"/rates/latest", "/rates/history", "/rates/convert", "/currencies/validate"} <= set(paths)


def test_request_id_header_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"
