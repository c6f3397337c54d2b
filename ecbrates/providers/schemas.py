"""Dataclasses describing normalized ECB rate snapshots and histories."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from ecbrates.services.fx_conversion import (
    RateParseError,
    convert,
    lookup_rate,
    normalize_currency,
    to_decimal,
)

BASE_CURRENCY = "EUR"


def _normalize_rates(
    rates: Mapping[str, Decimal | float | int | str], base_currency: str
) -> Mapping[str, Decimal]:
    normalized: dict[str, Decimal] = {base_currency: Decimal("1")}
    for code, value in rates.items():
        normalized_code = normalize_currency(code)
        rate = to_decimal(value)
        if not rate.is_finite() or rate <= 0:
            raise RateParseError(f"Rate for {normalized_code} must be a finite positive number, got {value!r}.")
        normalized[normalized_code] = rate
    normalized[base_currency] = Decimal("1")
    return MappingProxyType(normalized)


@dataclass(frozen=True)
class RateSnapshot:
    """One published day of reference rates against the base currency.

    The base currency is always present with a rate of exactly 1. ``date`` is
    ``None`` only for a feed that carried no day entries at all.
    """

    date: Optional[date]
    rates: Mapping[str, Decimal] = field(default_factory=dict)
    base_currency: str = BASE_CURRENCY
    source: str = "ecb"

    def __post_init__(self) -> None:
        base = normalize_currency(self.base_currency)
        object.__setattr__(self, "base_currency", base)
        object.__setattr__(self, "rates", _normalize_rates(self.rates, base))
        if not self.source or not self.source.strip():
            raise ValueError("source must be provided for RateSnapshot")

    @property
    def currencies(self) -> Tuple[str, ...]:
        return tuple(sorted(self.rates))

    def rate_for(self, code: str) -> Decimal:
        return lookup_rate(self.rates, code)

    def convert(
        self,
        amount: Decimal | int | float | str,
        from_currency: str,
        to_currency: str,
    ) -> Decimal:
        return convert(self, amount, from_currency, to_currency)


@dataclass(frozen=True)
class RatePoint:
    """Single historical rate observation."""

    date: date
    rate: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "rate", to_decimal(self.rate))


@dataclass(frozen=True)
class RateHistorySeries:
    """Timeseries of one currency's rate against the base, in feed order."""

    base_currency: str
    quote_currency: str
    source: str
    points: Tuple[RatePoint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_currency", normalize_currency(self.base_currency))
        object.__setattr__(self, "quote_currency", normalize_currency(self.quote_currency))
        if not self.source or not self.source.strip():
            raise ValueError("source must be provided for RateHistorySeries")
        for point in self.points:
            if not isinstance(point, RatePoint):
                raise TypeError("points must contain RatePoint instances")
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class RateHistory:
    """Ordered sequence of daily snapshots exactly as the feed listed them."""

    snapshots: Tuple[RateSnapshot, ...] = ()
    source: str = "ecb"

    def __post_init__(self) -> None:
        for snapshot in self.snapshots:
            if not isinstance(snapshot, RateSnapshot):
                raise TypeError("snapshots must contain RateSnapshot instances")
        object.__setattr__(self, "snapshots", tuple(self.snapshots))

    def __len__(self) -> int:
        return len(self.snapshots)

    def __iter__(self) -> Iterator[RateSnapshot]:
        return iter(self.snapshots)

    def __getitem__(self, index: int) -> RateSnapshot:
        return self.snapshots[index]

    @property
    def dates(self) -> Tuple[Optional[date], ...]:
        return tuple(snapshot.date for snapshot in self.snapshots)

    def get(self, day: date) -> Optional[RateSnapshot]:
        """Return the snapshot published for ``day``, if any."""

        for snapshot in self.snapshots:
            if snapshot.date == day:
                return snapshot
        return None

    def series(self, code: str) -> RateHistorySeries:
        """Extract one currency's rates, skipping days it was not published."""

        quote = normalize_currency(code)
        points = [
            RatePoint(date=snapshot.date, rate=snapshot.rates[quote])
            for snapshot in self.snapshots
            if quote in snapshot.rates and snapshot.date is not None
        ]
        base = self.snapshots[0].base_currency if self.snapshots else BASE_CURRENCY
        return RateHistorySeries(
            base_currency=base,
            quote_currency=quote,
            source=self.source,
            points=tuple(points),
        )
