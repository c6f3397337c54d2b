"""Validation helpers for request payloads."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from ecbrates.errors import ValidationError
from ecbrates.services.currency_registry import registry
from ecbrates.services.fx_conversion import RateParseError, to_decimal


def _preview_codes(codes: Sequence[str], max_items: int = 10) -> str:
    subset = list(sorted(codes))[:max_items]
    preview = ", ".join(subset)
    if len(codes) > max_items:
        preview += ", ..."
    return preview


def validate_currency_code(value: str | None, *, field: str = "currency_code") -> str:
    """Ensure the provided currency code is a recognized ECB currency."""

    if value is None or not str(value).strip():
        raise ValidationError(f"'{field}' is required.", payload={"field": field})

    normalized = str(value).strip().upper()
    if not normalized.isascii() or not registry.is_allowed(normalized):
        hint = _preview_codes(registry.sorted_codes(include_historical=False))
        raise ValidationError(
            f"Unsupported currency code '{normalized}'. Allowed codes: {hint}.",
            payload={"field": field, "code": normalized},
        )

    return normalized


def validate_amount(value: str | None, *, field: str = "amount") -> Decimal:
    """Parse a request amount into a Decimal."""

    if value is None or not str(value).strip():
        raise ValidationError(f"'{field}' is required.", payload={"field": field})
    try:
        return to_decimal(value)
    except RateParseError as exc:
        raise ValidationError(
            f"'{field}' must be a decimal number.", payload={"field": field}
        ) from exc
