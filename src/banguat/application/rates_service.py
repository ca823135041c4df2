# src/banguat/application/rates_service.py
"""
Rates Service - Business Logic for Exchange Rate Operations

This module contains the business rules applied on top of the raw provider
records:
- Translating currency symbols to provider codes
- Answering GTQ requests with the USD rate (GTQ substitution)
- Inverting quotes of USD-based currencies (EUR, DEG, GBP)
- Falling back to yesterday when today has no published rate
- Converting amounts between currencies through USD

Files that USE this module:
- banguat.app (composition root builds ExchangeRateService)
- tests.test_rates_service (unit tests)

Files that this module USES:
- banguat.adapters.providers.base (RateProvider contract)
- banguat.domain (records, code table, errors, rounding)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from dataclasses import replace  # Copy frozen records with changed fields
from datetime import date, timedelta  # Day arithmetic for the fallback rule
from decimal import Decimal  # Precise decimal arithmetic for financial calculations
from typing import Callable, List, Optional, Union  # Type hints

from banguat.adapters.providers.base import RateProvider
from banguat.domain.currencies import GTQ_CODE, USD_BASED_CODES, USD_CODE
from banguat.domain.errors import ResolutionFailure, UnknownError
from banguat.domain.models import (
    ByCode,
    BySymbol,
    CurrencyInfo,
    CurrencyRef,
    DateRange,
    RateQuote,
    as_currency_ref,
    round5,
    to_decimal,
)

log = logging.getLogger(__name__)

CurrencyInput = Union[CurrencyRef, int, str]
Amount = Union[Decimal, int, float, str]


def _is_gtq(ref: CurrencyRef) -> bool:
    return ref == ByCode(GTQ_CODE) or ref == BySymbol("GTQ")


def _is_usd(ref: CurrencyRef) -> bool:
    return ref == ByCode(USD_CODE) or ref == BySymbol("USD")


def invert_usd_based(quote: RateQuote) -> RateQuote:
    """
    Express a USD-based quote as its reciprocal, rounded to 5 digits.

    Quotes for currencies outside USD_BASED_CODES are returned unchanged.
    """
    if quote.provider_code not in USD_BASED_CODES:
        return quote
    if not quote.buy or not quote.sell:
        log.error("Cannot invert zero quote: %s", quote)
        raise UnknownError(f"Provider returned a zero rate for currency {quote.provider_code}")
    return replace(
        quote,
        buy=round5(Decimal(1) / quote.buy),
        sell=round5(Decimal(1) / quote.sell),
    )


class ExchangeRateService:
    """
    High-level service for querying and converting Banguat exchange rates.

    Holds no mutable state: every call fetches fresh data from the provider.
    """

    def __init__(self, provider: RateProvider, clock: Optional[Callable[[], date]] = None):
        """
        Initialize rates service with a provider.

        Args:
            provider: RateProvider instance (typically BanguatProvider)
            clock: Callable returning today's date (defaults to date.today)
        """
        self.provider = provider
        self.clock = clock or date.today

    def today(self) -> date:
        return self.clock()

    def get_today_exchange_rate(self) -> Optional[RateQuote]:
        """Get the provider's official USD reference rate for today, or None."""
        return self.provider.fetch_today_rate()

    def get_available_currencies(self) -> List[CurrencyInfo]:
        """Get every currency the provider quotes, annotated with symbols."""
        return self.provider.fetch_available_currencies()

    def get_range_exchange_rate(
        self,
        date_range: Optional[DateRange] = None,
        provider_code: Optional[int] = None,
        *,
        allow_fallback: bool = True,
    ) -> List[RateQuote]:
        """
        Get quotes for a range of days.

        When the range is exactly today and the provider has nothing yet, the
        query is repeated once for yesterday. The retry passes
        allow_fallback=False, so it never walks back further.

        Args:
            date_range: Inclusive range; a missing range or open end means today
            provider_code: Restrict to one currency; all currencies when None
            allow_fallback: Permit the one-day fallback retry

        Returns:
            List of quotes, possibly empty
        """
        today = self.today()
        date_range = (date_range or DateRange()).resolve(today)

        quotes = self.provider.fetch_rate_range(date_range, provider_code)
        if quotes:
            return quotes

        if allow_fallback and date_range.is_single_day and date_range.start == today:
            yesterday = today - timedelta(days=1)
            log.info("No rate published for %s yet, falling back to %s", today, yesterday)
            return self.get_range_exchange_rate(
                DateRange.single_day(yesterday), provider_code, allow_fallback=False
            )
        return quotes

    def _resolve_code(self, ref: Optional[CurrencyRef]) -> int:
        """
        Translate a currency reference into a provider code.

        Symbols are matched against the provider's current currency list.

        Raises:
            ResolutionFailure: If no currency is given or the symbol is unknown
        """
        if ref is None:
            raise ResolutionFailure("No currency given")
        if isinstance(ref, ByCode):
            return ref.code

        for info in self.provider.fetch_available_currencies():
            if info.symbol == ref.symbol:
                return info.provider_code
        log.warning("Currency symbol %s not quoted by provider", ref.symbol)
        raise ResolutionFailure(f"Unknown currency: {ref.symbol}")

    def get_currency_exchange_rate(self, currency: Optional[CurrencyInput]) -> Optional[RateQuote]:
        """
        Get today's normalized quote for one currency.

        GTQ is answered with the USD quote relabelled as GTQ. USD itself is
        always 1/1 and needs no provider call. EUR, DEG and GBP quotes are
        inverted to the USD basis.

        Args:
            currency: ByCode, BySymbol, provider code or symbol

        Returns:
            Normalized RateQuote, or None if no rate exists for today or yesterday

        Raises:
            ResolutionFailure: If the currency cannot be resolved
            UnknownError: On provider faults
        """
        ref = as_currency_ref(currency)

        gtq_primary = False
        if ref is not None and _is_gtq(ref):
            ref = ByCode(USD_CODE)
            gtq_primary = True

        if ref is not None and _is_usd(ref) and not gtq_primary:
            return RateQuote(
                provider_code=USD_CODE,
                date=self.today(),
                buy=Decimal(1),
                sell=Decimal(1),
            )

        code = self._resolve_code(ref)
        quotes = self.get_range_exchange_rate(DateRange.single_day(self.today()), code)
        if not quotes:
            log.warning("No exchange rate available for currency %s", code)
            return None

        quote = invert_usd_based(quotes[-1])

        if gtq_primary:
            quote = replace(quote, provider_code=GTQ_CODE)
        return quote

    def convert_currency(
        self,
        amount: Amount,
        from_currency: CurrencyInput = "GTQ",
        to_currency: CurrencyInput = "USD",
    ) -> Amount:
        """
        Convert an amount between two currencies through USD.

        Each hop is rounded to 5 digits: amount / from.buy, then * to.buy.
        Identical currencies return ``amount`` untouched without any lookup.

        Args:
            amount: Amount in the origin currency
            from_currency: Origin currency (defaults to GTQ)
            to_currency: Destination currency (defaults to USD)

        Returns:
            Converted amount as Decimal, or ``amount`` itself for a no-op

        Raises:
            ResolutionFailure: If either currency cannot be resolved
            UnknownError: If a rate is missing or zero, or on provider faults
        """
        origin_ref = as_currency_ref(from_currency)
        destination_ref = as_currency_ref(to_currency)
        if origin_ref == destination_ref:
            return amount

        origin = self.get_currency_exchange_rate(origin_ref)
        destination = self.get_currency_exchange_rate(destination_ref)
        if origin is None or destination is None:
            missing = from_currency if origin is None else to_currency
            raise UnknownError(f"No exchange rate available for {missing}")
        if not origin.buy:
            raise UnknownError(f"Provider returned a zero rate for {from_currency}")

        # Origin to USD
        value = round5(to_decimal(amount) / origin.buy)

        # USD to destination
        value = round5(value * destination.buy)

        log.debug("Converted %s %s -> %s %s", amount, from_currency, value, to_currency)
        return value
