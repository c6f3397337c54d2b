"""Currency registry backed by the static list of ECB reference currencies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

# Currencies in the current ECB reference rate table, base included.
CURRENT_CURRENCIES = frozenset(
    {
        "EUR", "USD", "JPY", "BGN", "CZK", "DKK", "GBP", "HUF", "PLN", "RON",
        "SEK", "CHF", "ISK", "NOK", "TRY", "AUD", "BRL", "CAD", "CNY", "HKD",
        "IDR", "ILS", "INR", "KRW", "MXN", "MYR", "NZD", "PHP", "SGD", "THB",
        "ZAR",
    }
)

# Currencies the ECB used to publish and that still appear in the full history.
HISTORICAL_CURRENCIES = frozenset(
    {
        "CYP", "EEK", "HRK", "LTL", "LVL", "MTL", "ROL", "RUB", "SIT", "SKK",
        "TRL",
    }
)

SUPPORTED_CURRENCIES = CURRENT_CURRENCIES | HISTORICAL_CURRENCIES


@dataclass(frozen=True)
class CurrencyRegistry:
    """Provides fast lookup for allowed currency codes."""

    codes: frozenset[str] = field(default=SUPPORTED_CURRENCIES)
    historical: frozenset[str] = field(default=HISTORICAL_CURRENCIES)

    def is_allowed(self, code: Any) -> bool:
        """Check if the given code is registered."""

        if not isinstance(code, str) or not code.strip():
            return False
        return code.strip().upper() in self.codes

    def is_historical(self, code: str) -> bool:
        return self.is_allowed(code) and code.strip().upper() in self.historical

    def sorted_codes(self, *, include_historical: bool = True) -> list[str]:
        codes: Iterable[str] = self.codes if include_historical else self.codes - self.historical
        return sorted(codes)


registry = CurrencyRegistry()


def is_valid_currency(code: Any) -> bool:
    """Return True if ``code`` is a recognized ECB reference currency.

    This says nothing about whether a particular snapshot carries a rate for
    the code; conversions check the snapshot itself.
    """

    return registry.is_allowed(code)


def init_registry(app) -> None:
    """Attach the registry to the Flask app."""

    app.extensions["currency_registry"] = registry
