"""Library entry points for fetching ECB reference rates and converting amounts.

Each fetch performs exactly one network round-trip and returns a fresh,
immutable result; nothing is cached between calls::

    from ecbrates.services.rates import convert, fetch_latest

    snapshot = fetch_latest()
    convert(snapshot, 100, "EUR", "USD")
"""

from __future__ import annotations

from ecbrates.providers.base import BaseRateProvider
from ecbrates.providers.registry import get_provider
from ecbrates.providers.schemas import RateHistory, RateSnapshot
from ecbrates.services.currency_registry import is_valid_currency
from ecbrates.services.fx_conversion import convert

__all__ = [
    "convert",
    "fetch_full_history",
    "fetch_latest",
    "fetch_recent_history",
    "is_valid_currency",
]


def _resolve(provider: BaseRateProvider | None) -> BaseRateProvider:
    return provider if provider is not None else get_provider()


def fetch_latest(provider: BaseRateProvider | None = None) -> RateSnapshot:
    """Fetch the most recently published day of rates."""

    return _resolve(provider).get_latest()


def fetch_recent_history(provider: BaseRateProvider | None = None) -> RateHistory:
    """Fetch the trailing ~90 published days, in feed order."""

    return _resolve(provider).get_recent_history()


def fetch_full_history(provider: BaseRateProvider | None = None) -> RateHistory:
    """Fetch every published day since the series began. The payload is large."""

    return _resolve(provider).get_full_history()
