"""Mock provider implementation for testing and local development."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from .base import BaseRateProvider
from .schemas import RateHistory, RateSnapshot

MOCK_AS_OF = date(2024, 5, 17)
MOCK_RATES: dict[str, Decimal] = {
    "USD": Decimal("1.1000"),
    "GBP": Decimal("0.8550"),
    "JPY": Decimal("160.00"),
    "CHF": Decimal("0.9800"),
}


class MockRateProvider(BaseRateProvider):
    """Deterministic provider returning synthetic reference rates."""

    name = "mock"
    recent_days = 64
    full_days = 256

    def get_latest(self) -> RateSnapshot:
        return self._snapshot(0)

    def get_recent_history(self) -> RateHistory:
        return self._history(self.recent_days)

    def get_full_history(self) -> RateHistory:
        return self._history(self.full_days)

    def _history(self, days: int) -> RateHistory:
        # Newest first, like the ECB history feeds.
        return RateHistory(
            snapshots=tuple(self._snapshot(offset) for offset in range(days)),
            source=self.name,
        )

    def _snapshot(self, offset: int) -> RateSnapshot:
        drift = Decimal(offset) * Decimal("0.0001")
        return RateSnapshot(
            date=MOCK_AS_OF - timedelta(days=offset),
            rates={code: rate + drift for code, rate in MOCK_RATES.items()},
            source=self.name,
        )
