from __future__ import annotations

from datetime import date

import pytest

from ecbrates.providers.utils import ParsedDay, XMLShapeError, parse_envelope
from tests.fixtures import load_xml

ENVELOPE = (
    '<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01" '
    'xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">{body}</gesmes:Envelope>'
)


def _envelope(body: str) -> str:
    return ENVELOPE.format(body=body)


def test_parse_envelope_reads_daily_feed():
    days = parse_envelope(load_xml("eurofxref-daily.xml"))

    assert len(days) == 1
    day = days[0]
    assert day.day == date(2024, 5, 17)
    assert len(day.rates) == 30
    assert day.rates["USD"] == "1.0866"
    assert day.rates["GBP"] == "0.85620"


def test_parse_envelope_keeps_feed_order():
    days = parse_envelope(load_xml("eurofxref-hist.xml"))
    assert [day.day for day in days] == [
        date(2024, 5, 17),
        date(2024, 5, 16),
        date(2024, 5, 15),
        date(2007, 12, 31),
        date(1999, 1, 4),
    ]


def test_parse_envelope_with_no_days_is_empty():
    assert parse_envelope(_envelope("<Cube></Cube>")) == []


def test_parse_envelope_day_without_rates():
    days = parse_envelope(_envelope('<Cube><Cube time="2024-05-17"/></Cube>'))
    assert days == [ParsedDay(day=date(2024, 5, 17), rates={})]


@pytest.mark.parametrize(
    "payload",
    [
        b"",
        b"<not-xml",
        _envelope(""),
        "<Envelope><Cube><Cube time='2024-05-17'/></Cube></Envelope>",
        _envelope('<Cube><Cube><Cube currency="USD" rate="1.1"/></Cube></Cube>'),
        _envelope('<Cube><Cube time="17/05/2024"/></Cube>'),
        _envelope('<Cube><Cube time="2024-05-17"><Cube currency="USD"/></Cube></Cube>'),
        _envelope('<Cube><Cube time="2024-05-17"><Cube rate="1.1"/></Cube></Cube>'),
    ],
    ids=[
        "empty-body",
        "malformed",
        "missing-outer-cube",
        "no-namespace",
        "missing-time",
        "bad-time",
        "missing-rate",
        "missing-currency",
    ],
)
def test_parse_envelope_rejects_unexpected_shapes(payload):
    with pytest.raises(XMLShapeError):
        parse_envelope(payload)
