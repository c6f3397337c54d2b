"""Provider interfaces and data structures for reference rate sources."""

from .schemas import BASE_CURRENCY, RateHistory, RateHistorySeries, RatePoint, RateSnapshot
from .base import BaseRateProvider, NetworkError, ParseError, ProviderError
from .http_client import HTTPClient, HTTPClientConfig, HTTPClientError
from .ecb_client import ECBClient, ECBClientConfig
from .ecb_provider import ECBRateProvider

__all__ = [
    "BASE_CURRENCY",
    "BaseRateProvider",
    "ECBClient",
    "ECBClientConfig",
    "ECBRateProvider",
    "HTTPClient",
    "HTTPClientConfig",
    "HTTPClientError",
    "NetworkError",
    "ParseError",
    "ProviderError",
    "RateHistory",
    "RateHistorySeries",
    "RatePoint",
    "RateSnapshot",
]
