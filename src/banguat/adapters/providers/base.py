# src/banguat/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Providers

This module defines the abstract base class for rate providers.
It establishes the contract the exchange rate service relies on.

Files that USE this module:
- banguat.adapters.providers.banguat (BanguatProvider implements RateProvider)
- banguat.application.rates_service (ExchangeRateService depends on RateProvider)

Files that this module USES:
- banguat.domain.models (record types returned by providers)
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from banguat.domain.models import CurrencyInfo, DateRange, RateQuote


class RateProvider(ABC):
    @abstractmethod
    def fetch_today_rate(self) -> Optional[RateQuote]:
        """Return today's official rate, or None if none is published."""
        raise NotImplementedError

    @abstractmethod
    def fetch_available_currencies(self) -> List[CurrencyInfo]:
        """Return every currency the provider quotes, in provider order."""
        raise NotImplementedError

    @abstractmethod
    def fetch_rate_range(
        self, date_range: DateRange, provider_code: Optional[int] = None
    ) -> List[RateQuote]:
        """Return quotes in range, for one currency or for all when code is None."""
        raise NotImplementedError
