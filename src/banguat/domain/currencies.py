# src/banguat/domain/currencies.py
"""
Currency Code Table - Provider Codes to ISO Symbols

Banguat identifies currencies by its own integer codes. This module holds the
read-only table translating the codes we know about into 3-letter symbols,
plus the special codes the business rules depend on.

Files that USE this module:
- banguat.domain.models (BySymbol / ByCode helpers)
- banguat.adapters.providers.banguat (annotates CurrencyInfo.symbol)
- banguat.application.rates_service (GTQ/USD codes, USD-basis set)

Files that this module USES:
- None (pure domain layer)
"""
from types import MappingProxyType
from typing import Mapping, Optional

GTQ_CODE = 1
USD_CODE = 2

CURRENCY_SYMBOLS: Mapping[int, str] = MappingProxyType({
    1: "GTQ",
    2: "USD",
    3: "JPY",
    4: "CHF",
    7: "CAD",
    9: "GBP",
    15: "SEK",
    16: "CRC",
    18: "MXN",
    19: "HNL",
    21: "NIO",
    23: "DKK",
    24: "EUR",
    25: "NOK",
    29: "ARS",
    30: "BRL",
    31: "KRW",
    32: "HKD",
    33: "TWD",
    34: "CNY",
    35: "PKR",
    36: "INR",
    38: "COP",
    39: "DOP",
    40: "MYR",
    41: "VES",
    42: "PLN",
})

# Quoted by the provider as USD per foreign unit.
# 26 (DEG, special drawing rights) has no symbol in the table above.
USD_BASED_CODES = frozenset({
    24,  # EUR
    26,  # DEG
    9,  # GBP
})


def symbol_of(code: int) -> Optional[str]:
    """Return the 3-letter symbol for a provider code, or None if unknown."""
    return CURRENCY_SYMBOLS.get(code)

