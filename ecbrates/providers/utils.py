"""Helper utilities for decoding the ECB eurofxref XML envelope."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List

ECB_NS = {
    "gesmes": "http://www.gesmes.org/xml/2002-08-01",
    "def": "http://www.ecb.int/vocabulary/2002-08-01/eurofxref",
}


class XMLShapeError(ValueError):
    """Raised when an ECB XML payload cannot be decoded."""


@dataclass(frozen=True)
class ParsedDay:
    """One ``<Cube time=...>`` element with its raw currency/rate attributes."""

    day: date
    rates: Dict[str, str] = field(default_factory=dict)


def parse_envelope(content: bytes | str) -> List[ParsedDay]:
    """Decode an ECB reference rate envelope into day entries, in feed order.

    The envelope looks like::

        <gesmes:Envelope>
          <Cube>
            <Cube time="2024-05-17">
              <Cube currency="USD" rate="1.0866"/>
            </Cube>
          </Cube>
        </gesmes:Envelope>

    An outer ``Cube`` with no day entries decodes to an empty list.

    Raises:
        XMLShapeError: If the payload is not XML or is missing required
            elements or attributes.
    """

    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise XMLShapeError(f"Malformed XML payload: {exc}") from exc

    outer = root.find("def:Cube", ECB_NS)
    if outer is None:
        raise XMLShapeError("ECB XML payload is missing the outer Cube element.")

    days: List[ParsedDay] = []
    for day_cube in outer.findall("def:Cube", ECB_NS):
        days.append(_parse_day(day_cube))
    return days


def _parse_day(day_cube: ET.Element) -> ParsedDay:
    raw_time = day_cube.attrib.get("time")
    if not raw_time:
        raise XMLShapeError("Day entry is missing its 'time' attribute.")
    try:
        day = date.fromisoformat(raw_time.strip())
    except ValueError as exc:
        raise XMLShapeError(f"Day entry has an invalid date {raw_time!r}.") from exc

    rates: Dict[str, str] = {}
    for currency_cube in day_cube.findall("def:Cube", ECB_NS):
        currency = currency_cube.attrib.get("currency")
        rate = currency_cube.attrib.get("rate")
        if not currency or not rate:
            raise XMLShapeError(f"Rate entry for {raw_time} is missing 'currency' or 'rate'.")
        rates[currency.strip().upper()] = rate.strip()
    return ParsedDay(day=day, rates=rates)
