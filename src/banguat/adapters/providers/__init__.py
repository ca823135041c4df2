"""
Provider Adapters - External API Clients

This package contains the client for the Banguat exchange rate web service.
Providers implement the RateProvider contract.
"""

from banguat.adapters.providers.base import RateProvider
from banguat.adapters.providers.banguat import BanguatProvider
from banguat.adapters.providers.soap import SoapTransport

__all__ = [
    "RateProvider",
    "BanguatProvider",
    "SoapTransport",
]
