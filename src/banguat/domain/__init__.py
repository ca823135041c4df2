"""
Domain Layer - Pure Business Objects

This package contains domain models, the currency code table and errors.
No dependencies on infrastructure or external systems.
"""

from banguat.domain.currencies import (
    CURRENCY_SYMBOLS,
    GTQ_CODE,
    USD_BASED_CODES,
    USD_CODE,
    symbol_of,
)
from banguat.domain.errors import (
    BanguatError,
    ResolutionFailure,
    UnknownError,
)
from banguat.domain.models import (
    ByCode,
    BySymbol,
    CurrencyInfo,
    CurrencyRef,
    DateRange,
    RateQuote,
    as_currency_ref,
    round5,
)

__all__ = [
    "CURRENCY_SYMBOLS",
    "GTQ_CODE",
    "USD_CODE",
    "USD_BASED_CODES",
    "symbol_of",
    "BanguatError",
    "UnknownError",
    "ResolutionFailure",
    "ByCode",
    "BySymbol",
    "CurrencyRef",
    "CurrencyInfo",
    "RateQuote",
    "DateRange",
    "as_currency_ref",
    "round5",
]
