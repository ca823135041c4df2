"""
Banguat - Exchange Rate Client for Banco de Guatemala

Queries the Banguat "TipoCambio" web service and normalizes its answers:
today's rate, rate ranges, available currencies and currency conversion.
"""

__version__ = "1.0.0"

from banguat.app import build_exchange_rate_service
from banguat.application.rates_service import ExchangeRateService
from banguat.domain import (
    ByCode,
    BySymbol,
    CurrencyInfo,
    DateRange,
    RateQuote,
    ResolutionFailure,
    UnknownError,
)

__all__ = [
    "__version__",
    "build_exchange_rate_service",
    "ExchangeRateService",
    "ByCode",
    "BySymbol",
    "CurrencyInfo",
    "DateRange",
    "RateQuote",
    "ResolutionFailure",
    "UnknownError",
]
