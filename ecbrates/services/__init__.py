"""Service layer modules."""

from .fx_conversion import (
    ConversionError,
    CurrencyNotFoundError,
    RateParseError,
    convert,
    round_half_away,
)
from .currency_registry import init_registry, is_valid_currency, registry
