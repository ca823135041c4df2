# src/banguat/domain/errors.py
"""
Domain Errors - Exchange Rate Client Exceptions

This module defines the exceptions raised by the Banguat client.

Files that USE this module:
- banguat.adapters.providers.soap (raises UnknownError on transport faults)
- banguat.adapters.providers.banguat (raises UnknownError on malformed records)
- banguat.application.rates_service (raises ResolutionFailure / UnknownError)
- tests.* (assert on raised errors)

Files that this module USES:
- None (pure domain layer)
"""
from typing import Optional


class BanguatError(Exception):
    """Base exception for the Banguat client."""
    pass


class UnknownError(BanguatError):
    """
    Raised when a round trip with the rate provider cannot be completed.

    Covers network failures, malformed or unsupported responses and faults
    reported by the provider itself. ``message`` carries the provider's text.
    """

    def __init__(self, message: str, *, fault_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.fault_code = fault_code


class ResolutionFailure(UnknownError):
    """Raised when a currency code or symbol matches no known currency."""
    pass
