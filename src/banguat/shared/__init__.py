"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Provider date handling
- Logging configuration
"""

from banguat.shared.validators import (
    PROVIDER_DATE_FORMAT,
    validate_currency_symbol,
    validate_endpoint_url,
    validate_provider_date,
    validate_timezone,
)
from banguat.shared.dates import format_provider_date, local_clock, parse_provider_date
from banguat.shared.logging_conf import setup_logging

__all__ = [
    "PROVIDER_DATE_FORMAT",
    "validate_currency_symbol",
    "validate_endpoint_url",
    "validate_provider_date",
    "validate_timezone",
    "format_provider_date",
    "parse_provider_date",
    "local_clock",
    "setup_logging",
]
