"""European Central Bank reference rate provider."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from time import perf_counter
from typing import Any, Callable, List, TypeVar

from ecbrates.logging import provider_log_extra
from ecbrates.providers.base import BaseRateProvider, ParseError, ProviderError
from ecbrates.providers.schemas import BASE_CURRENCY, RateHistory, RateSnapshot

from .ecb_client import FEED_FULL, FEED_LATEST, FEED_RECENT, ECBClient, ECBClientConfig
from .utils import ParsedDay

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ECBRateProvider(BaseRateProvider):
    """Provider that reads the ECB eurofxref XML feeds directly."""

    name = "ecb"

    def __init__(self, client: ECBClient) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> ECBRateProvider:
        timeout = config.get("REQUEST_TIMEOUT_SECONDS")
        client_config = ECBClientConfig(
            base_url=str(config.get("ECB_RATES_BASE_URL")),
            timeout=float(timeout) if timeout not in (None, "") else None,
            max_retries=int(config.get("ECB_MAX_RETRIES", 1)),
            backoff_seconds=float(config.get("ECB_BACKOFF_SECONDS", 0.5)),
            latest_path=str(config.get("ECB_LATEST_PATH", "eurofxref-daily.xml")),
            recent_path=str(config.get("ECB_RECENT_PATH", "eurofxref-hist-90d.xml")),
            full_path=str(config.get("ECB_FULL_PATH", "eurofxref-hist.xml")),
        )
        return cls(ECBClient(client_config))

    def get_latest(self) -> RateSnapshot:
        return self._timed_fetch(FEED_LATEST, self._build_latest)

    def get_recent_history(self) -> RateHistory:
        return self._timed_fetch(FEED_RECENT, self._build_history)

    def get_full_history(self) -> RateHistory:
        return self._timed_fetch(FEED_FULL, self._build_history)

    def _timed_fetch(self, feed: str, build: Callable[[List[ParsedDay]], T]) -> T:
        return _log_fetch(self.name, feed, lambda: build(self._client.fetch(feed)))

    def _build_latest(self, days: List[ParsedDay]) -> RateSnapshot:
        if not days:
            return RateSnapshot(date=None, rates={}, source=self.name)
        return self._build_snapshot(days[0])

    def _build_history(self, days: List[ParsedDay]) -> RateHistory:
        return RateHistory(
            snapshots=tuple(self._build_snapshot(day) for day in days),
            source=self.name,
        )

    def _build_snapshot(self, parsed: ParsedDay) -> RateSnapshot:
        try:
            return RateSnapshot(
                date=parsed.day,
                rates=parsed.rates,
                base_currency=BASE_CURRENCY,
                source=self.name,
            )
        except ValueError as exc:
            raise ParseError(f"Invalid rate entry for {parsed.day.isoformat()}: {exc}") from exc


def _log_fetch(provider: str, feed: str, fetch: Callable[[], T]) -> T:
    start = perf_counter()
    try:
        result = fetch()
    except ProviderError as exc:
        duration = (perf_counter() - start) * 1000
        logger.warning(
            "Provider fetch failed: %s",
            exc,
            extra=provider_log_extra(
                provider=provider,
                feed=feed,
                event="provider.fetch",
                status="error",
                duration_ms=duration,
                error=str(exc),
            ),
        )
        raise

    duration = (perf_counter() - start) * 1000
    logger.info(
        "Provider fetch succeeded",
        extra=provider_log_extra(
            provider=provider,
            feed=feed,
            event="provider.fetch",
            status="success",
            duration_ms=duration,
        ),
    )
    return result
