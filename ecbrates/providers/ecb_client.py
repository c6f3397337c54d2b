from __future__ import annotations

import logging
from typing import List, Optional

from ecbrates.providers.base import NetworkError, ParseError
from ecbrates.providers.http_client import HTTPClient, HTTPClientConfig, HTTPClientError
from ecbrates.providers.utils import ParsedDay, XMLShapeError, parse_envelope

logger = logging.getLogger(__name__)

FEED_LATEST = "latest"
FEED_RECENT = "recent"
FEED_FULL = "full"


class ECBClientConfig:
    """Configuration parameters for the ECB reference rate client."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        max_retries: int = 1,
        backoff_seconds: float = 0.5,
        latest_path: str = "eurofxref-daily.xml",
        recent_path: str = "eurofxref-hist-90d.xml",
        full_path: str = "eurofxref-hist.xml",
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_seconds = backoff_seconds
        self.feed_paths = {
            FEED_LATEST: latest_path,
            FEED_RECENT: recent_path,
            FEED_FULL: full_path,
        }


class ECBClient:
    """HTTP client for the ECB eurofxref feeds built on the shared wrapper."""

    def __init__(
        self,
        config: ECBClientConfig,
        client: HTTPClient | None = None,
    ) -> None:
        self._config = config
        self._client = client or HTTPClient(
            HTTPClientConfig(
                base_url=config.base_url,
                timeout=config.timeout,
                max_retries=config.max_retries,
                backoff_seconds=config.backoff_seconds,
            )
        )

    def fetch(self, feed: str) -> List[ParsedDay]:
        try:
            path = self._config.feed_paths[feed]
        except KeyError as exc:
            raise ValueError(f"Unknown ECB feed '{feed}'.") from exc

        try:
            content = self._client.get(path)
        except HTTPClientError as exc:
            raise NetworkError(str(exc)) from exc

        try:
            days = parse_envelope(content)
        except XMLShapeError as exc:
            raise ParseError(f"ECB {feed} feed: {exc}") from exc

        logger.debug("Decoded %s day entries from ECB %s feed", len(days), feed)
        return days
