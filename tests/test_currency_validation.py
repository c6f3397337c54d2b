from __future__ import annotations

import pytest

from ecbrates.errors import ValidationError
from ecbrates.services.currency_registry import (
    CURRENT_CURRENCIES,
    HISTORICAL_CURRENCIES,
    is_valid_currency,
    registry,
)
from ecbrates.validation import validate_amount, validate_currency_code


@pytest.mark.parametrize("code", ["EUR", "usd", " jpy ", "CYP", "HRK", "RUB"])
def test_is_valid_currency_accepts_current_and_historical(code):
    assert is_valid_currency(code)


@pytest.mark.parametrize("code", ["XXX", "", "   ", "US", "USDX", None, 840])
def test_is_valid_currency_rejects_unknown(code):
    assert not is_valid_currency(code)


def test_registry_is_immutable():
    assert isinstance(registry.codes, frozenset)
    assert CURRENT_CURRENCIES.isdisjoint(HISTORICAL_CURRENCIES)
    assert registry.is_historical("lvl")
    assert not registry.is_historical("USD")


def test_validate_currency_code_normalizes():
    assert validate_currency_code(" gbp ", field="to") == "GBP"


def test_validate_currency_code_reports_field():
    with pytest.raises(ValidationError) as exc_info:
        validate_currency_code("xyz", field="from")
    assert exc_info.value.payload == {"field": "from", "code": "XYZ"}
    assert exc_info.value.status_code == 422


def test_validate_amount_rejects_text():
    with pytest.raises(ValidationError):
        validate_amount("lots")
    with pytest.raises(ValidationError):
        validate_amount(" ")


def test_currency_list_endpoint(client):
    response = client.get("/currencies")
    assert response.status_code == 200
    payload = response.get_json()
    assert "EUR" in payload["codes"]
    assert "CYP" in payload["codes"]
    assert payload["historical"] == sorted(HISTORICAL_CURRENCIES)


def test_validate_currency_accepts_known_code(client):
    response = client.post("/currencies/validate", json={"code": "usd"})
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["code"] == "USD"
    assert payload["message"] == "Currency code is valid."


def test_validate_currency_flags_historical_code(client):
    response = client.post("/currencies/validate", json={"code": "eek"})
    assert response.status_code == 200
    assert response.get_json()["message"] == "Currency code is valid but no longer published."


def test_validate_currency_rejects_unknown_code(client):
    response = client.post("/currencies/validate", json={"code": "xyz"})
    assert response.status_code == 422
    payload = response.get_json()
    assert payload["code"] == "XYZ"
    assert payload["field"] == "code"
    assert "Unsupported currency code" in payload["message"]
    assert payload["field_errors"] == {"code": [payload["message"]]}


def test_validate_currency_requires_code_field(client):
    response = client.post("/currencies/validate", json={})
    assert response.status_code == 422
    payload = response.get_json()
    assert payload["field"] == "code"
    assert "is required" in payload["message"]
