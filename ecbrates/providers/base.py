"""Abstract interface for reference rate providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .schemas import RateHistory, RateSnapshot


class ProviderError(Exception):
    """Raised when an upstream provider cannot fulfill a request."""


class NetworkError(ProviderError):
    """Raised when the rate feed cannot be reached or read."""


class ParseError(ProviderError):
    """Raised when the rate feed does not have the expected shape."""


class BaseRateProvider(ABC):
    """Defines the interface all rate providers must implement."""

    name: str

    @abstractmethod
    def get_latest(self) -> RateSnapshot:
        """Retrieve the most recently published day of rates."""

    @abstractmethod
    def get_recent_history(self) -> RateHistory:
        """Retrieve the trailing window (about 90 days) of published rates."""

    @abstractmethod
    def get_full_history(self) -> RateHistory:
        """Retrieve every published day of rates."""
