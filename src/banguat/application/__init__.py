"""
Application Layer - Use Cases and Services

This package contains the exchange rate service that applies business rules
on top of provider records. Providers are reached through the RateProvider
interface only.
"""

from banguat.application.rates_service import ExchangeRateService, invert_usd_based

__all__ = [
    "ExchangeRateService",
    "invert_usd_based",
]
