"""Shared utilities for FX cross-rate conversion and rounding."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, Overflow, getcontext, localcontext
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from ecbrates.providers.schemas import RateSnapshot

ROUNDING_PRECISION = 28
CONVERSION_DIGITS = 4


class ConversionError(ValueError):
    """Raised when a conversion cannot be computed from a snapshot."""


class CurrencyNotFoundError(ConversionError):
    """Raised when a snapshot holds no rate for the requested currency."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Rate unavailable for currency '{code}'.")
        self.code = code


class RateParseError(ConversionError):
    """Raised when a rate or amount cannot be read as a decimal number."""


def get_decimal_context():
    """Return the shared Decimal context used across FX conversions."""

    context = getcontext().copy()
    context.prec = ROUNDING_PRECISION
    context.rounding = ROUND_HALF_UP
    return context


def normalize_currency(code: str) -> str:
    """Normalize a currency code to canonical uppercase form."""

    if not code or not str(code).strip():
        raise ValueError("Currency code cannot be blank.")
    normalized = str(code).strip().upper()
    if not normalized.isascii():
        raise ValueError(f"Currency code must be ASCII: {code!r}")
    return normalized


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert input into a Decimal using the shared context.

    Raises:
        RateParseError: If the value is not a decimal literal.
    """

    if isinstance(value, bool):
        raise RateParseError(f"Expected a number, got {value!r}.")
    context = get_decimal_context()
    with localcontext(context):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise RateParseError(f"Invalid decimal value {value!r}.") from exc


def round_half_away(value: Decimal | int | float | str, digits: int = CONVERSION_DIGITS) -> Decimal:
    """Round to ``digits`` decimal places, halves away from zero.

    NaN and infinite values are returned unchanged.

    Raises:
        ConversionError: If the rounded value needs more digits than the
            shared context precision allows.
    """

    number = to_decimal(value)
    if not number.is_finite():
        return number
    exponent = Decimal(1).scaleb(-digits)
    context = get_decimal_context()
    with localcontext(context):
        try:
            return number.quantize(exponent, rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise ConversionError(f"Value {number} is out of range for {digits} decimal places.") from exc


def cross_rate_convert(
    amount: Decimal | int | float | str,
    rate_from: Decimal | int | float | str,
    rate_to: Decimal | int | float | str,
) -> Decimal:
    """Convert ``amount`` between two currencies quoted against a shared base."""

    rounded_from = round_half_away(rate_from)
    rounded_to = round_half_away(rate_to)
    if rounded_from == 0:
        raise ConversionError("Source rate rounds to zero; cannot convert.")

    amount_dec = to_decimal(amount)
    context = get_decimal_context()
    with localcontext(context):
        try:
            converted = amount_dec * rounded_to / rounded_from
        except (InvalidOperation, Overflow) as exc:
            raise ConversionError(f"Amount {amount_dec} is out of range for conversion.") from exc
    return round_half_away(converted)


def lookup_rate(rates: Mapping[str, Decimal], code: str) -> Decimal:
    """Return the rate for ``code`` or raise CurrencyNotFoundError."""

    normalized = normalize_currency(code)
    try:
        return rates[normalized]
    except KeyError as exc:
        raise CurrencyNotFoundError(normalized) from exc


def convert(
    snapshot: RateSnapshot,
    amount: Decimal | int | float | str,
    from_currency: str,
    to_currency: str,
) -> Decimal:
    """Convert ``amount`` from one currency to another using a rate snapshot.

    Both currencies must be present in the snapshot itself; a code that is a
    recognized ISO currency but missing from that day's table still fails.

    Raises:
        CurrencyNotFoundError: If either currency is absent from the snapshot.
        RateParseError: If ``amount`` is not a decimal number.
        ConversionError: If the result is out of range for the rounding precision.
    """

    rate_from = lookup_rate(snapshot.rates, from_currency)
    rate_to = lookup_rate(snapshot.rates, to_currency)
    return cross_rate_convert(amount, rate_from, rate_to)
