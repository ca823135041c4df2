# src/banguat/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the records returned by the Banguat client:
- Currency descriptions and rate quotes
- Inclusive day ranges
- The ByCode / BySymbol currency reference used at the API boundary

Files that USE this module:
- banguat.adapters.providers.* (providers build CurrencyInfo and RateQuote)
- banguat.application.rates_service (service consumes and normalizes them)
- tests.* (tests use domain models for test data)

Files that this module USES:
- banguat.shared.validators (symbol format check)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from datetime import date  # Day-granular dates, no time component
from decimal import Decimal, ROUND_HALF_UP  # Precise decimal arithmetic for financial calculations
from typing import Optional, Union  # Type hints for optional values and unions

from banguat.shared.validators import validate_currency_symbol

RATE_PRECISION = Decimal("0.00001")


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """
    Convert a numeric value into a Decimal without float noise.

    Floats go through ``str`` first so that 7.75 becomes Decimal("7.75").
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a numeric amount")
    return Decimal(str(value))


def round5(value: Union[Decimal, int, float, str]) -> Decimal:
    """Round to 5 fractional digits, half away from zero."""
    return to_decimal(value).quantize(RATE_PRECISION, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class CurrencyInfo:
    """
    A currency quoted by the provider.

    Attributes:
        provider_code: Provider's integer code for the currency
        symbol: 3-letter symbol from the code table, None if not in the table
        display_name: Provider's description (e.g. "Dólares de EE.UU.")
    """
    provider_code: int
    symbol: Optional[str]
    display_name: str


@dataclass(frozen=True)
class RateQuote:
    """
    A buy/sell quote for one currency on one day.

    Attributes:
        provider_code: Provider's integer code for the quoted currency
        date: Day the quote applies to
        buy: Provider's buying price ("compra")
        sell: Provider's selling price ("venta")
    """
    provider_code: int
    date: date
    buy: Decimal
    sell: Decimal


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive, day-granular range of dates.

    Either end may be left as None, meaning "today"; call ``resolve`` with
    the current date before querying the provider.
    """
    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self) -> None:
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValueError(f"DateRange start {self.start} is after end {self.end}")

    @classmethod
    def single_day(cls, day: date) -> DateRange:
        return cls(day, day)

    @property
    def is_resolved(self) -> bool:
        return self.start is not None and self.end is not None

    def resolve(self, today: date) -> DateRange:
        """
        Fill open ends with ``today``.

        Raises:
            ValueError: If the given start falls after today with no end given
        """
        if self.is_resolved:
            return self
        return DateRange(self.start or today, self.end or today)

    @property
    def is_single_day(self) -> bool:
        return self.is_resolved and self.start == self.end


@dataclass(frozen=True)
class ByCode:
    """Currency referenced by its provider code."""
    code: int


@dataclass(frozen=True)
class BySymbol:
    """Currency referenced by its 3-letter symbol (stored upper-case)."""
    symbol: str

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str):
            raise TypeError(f"Currency symbol must be a string, got {type(self.symbol).__name__}")
        normalized = self.symbol.strip().upper()
        if not validate_currency_symbol(normalized):
            raise ValueError(f"Invalid currency symbol: {self.symbol!r}")
        object.__setattr__(self, "symbol", normalized)


CurrencyRef = Union[ByCode, BySymbol]


def as_currency_ref(value: Union[CurrencyRef, int, str, None]) -> Optional[CurrencyRef]:
    """
    Coerce a caller-supplied currency identifier into a CurrencyRef.

    Integers and ASCII-digit strings become ByCode, other strings BySymbol.
    None passes through so that callers can report it as unresolvable.

    Raises:
        TypeError: If the value is not an int, str, ByCode or BySymbol
        ValueError: If a string is neither numeric nor a valid symbol
    """
    if value is None or isinstance(value, (ByCode, BySymbol)):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a currency identifier")
    if isinstance(value, int):
        return ByCode(value)
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdecimal():
            return ByCode(int(stripped))
        return BySymbol(stripped)
    raise TypeError(f"Unsupported currency identifier type: {type(value).__name__}")
