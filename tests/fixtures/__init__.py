"""Test fixture helpers."""

from __future__ import annotations

from pathlib import Path

_FIXTURE_ROOT = Path(__file__).parent


def load_xml(name: str) -> bytes:
    """Load an XML fixture by filename."""

    return (_FIXTURE_ROOT / name).read_bytes()


ECB_BASE_URL = "https://www.ecb.europa.eu/stats/eurofxref"
ECB_LATEST_URL = f"{ECB_BASE_URL}/eurofxref-daily.xml"
ECB_RECENT_URL = f"{ECB_BASE_URL}/eurofxref-hist-90d.xml"
ECB_FULL_URL = f"{ECB_BASE_URL}/eurofxref-hist.xml"
