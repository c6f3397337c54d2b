"""Tests for the library entry points that work without a Flask app."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from ecbrates.providers.base import NetworkError
from ecbrates.providers.mock import MockRateProvider
from ecbrates.providers.registry import reset_registry
from ecbrates.services.rates import (
    convert,
    fetch_full_history,
    fetch_latest,
    fetch_recent_history,
    is_valid_currency,
)
from tests.fixtures import ECB_LATEST_URL


@pytest.fixture(autouse=True)
def _default_provider(monkeypatch):
    monkeypatch.delenv("FX_RATE_PROVIDER", raising=False)
    reset_registry()
    yield
    reset_registry()


def test_fetch_latest_uses_given_provider():
    snapshot = fetch_latest(MockRateProvider())
    assert snapshot.date == date(2024, 5, 17)
    assert convert(snapshot, 100, "EUR", "USD") == Decimal("110.0000")
    assert convert(snapshot, 100, "USD", "JPY") == Decimal("14545.4545")


def test_fetch_histories_use_given_provider():
    provider = MockRateProvider()
    assert len(fetch_full_history(provider)) > len(fetch_recent_history(provider))


def test_fetch_latest_defaults_to_ecb_feed(ecb_feeds):
    snapshot = fetch_latest()
    assert snapshot.source == "ecb"
    assert snapshot.date == date(2024, 5, 17)


def test_fetch_histories_default_to_ecb_feeds(ecb_feeds):
    assert len(fetch_recent_history()) == 3
    assert len(fetch_full_history()) == 5


def test_each_fetch_is_a_fresh_request(ecb_feeds):
    first = fetch_latest()
    second = fetch_latest()
    assert first == second
    assert first is not second
    assert len(ecb_feeds.calls) == 2


def test_fetch_latest_surfaces_network_error(ecb_feeds):
    ecb_feeds.replace(
        "GET",
        ECB_LATEST_URL,
        status=502,
    )
    with pytest.raises(NetworkError):
        fetch_latest()


def test_is_valid_currency_is_reexported():
    assert is_valid_currency("usd")
    assert not is_valid_currency("XXX")
