"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
import responses as responses_lib

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from ecbrates import create_app  # noqa: E402
from ecbrates.providers.mock import MockRateProvider  # noqa: E402
from ecbrates.providers.schemas import RateSnapshot  # noqa: E402
from tests.fixtures import ECB_FULL_URL, ECB_LATEST_URL, ECB_RECENT_URL, load_xml  # noqa: E402


@pytest.fixture()
def app() -> Iterator:
    """Flask application wired to the real ECB provider; HTTP is mocked per test."""

    flask_app = create_app("development")
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture()
def client(app):
    """Provide a Flask test client."""

    with app.test_client() as client:
        yield client


@pytest.fixture()
def mock_provider_app(app):
    """Application whose rate provider returns deterministic synthetic data."""

    app.extensions["rate_provider"] = MockRateProvider()
    return app


@pytest.fixture()
def ecb_feeds() -> Iterator[responses_lib.RequestsMock]:
    """Serve the bundled XML fixtures on the three ECB feed URLs."""

    with responses_lib.RequestsMock(assert_all_requests_are_fired=False) as mocked:
        mocked.add(responses_lib.GET, ECB_LATEST_URL, body=load_xml("eurofxref-daily.xml"), status=200)
        mocked.add(responses_lib.GET, ECB_RECENT_URL, body=load_xml("eurofxref-hist-90d.xml"), status=200)
        mocked.add(responses_lib.GET, ECB_FULL_URL, body=load_xml("eurofxref-hist.xml"), status=200)
        yield mocked


@pytest.fixture()
def sample_snapshot() -> RateSnapshot:
    """Small snapshot with round numbers for conversion arithmetic."""

    return RateSnapshot(
        date=None,
        rates={"USD": "1.1000", "JPY": "160.00", "GBP": "0.8550"},
    )
