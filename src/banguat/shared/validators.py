"""
Input Validation Utilities - Configuration and Identifier Validation

This module provides validation functions for configuration values and
currency identifiers, so that bad settings or symbols fail early instead of
producing confusing provider faults.

Files that USE this module:
- banguat.config.settings (uses validation functions in Settings field validators)
- banguat.domain.models (BySymbol validates its symbol)
- banguat.adapters.providers.banguat (validates dates in provider replies)

Files that this module USES:
- None (pure utility functions)
"""
import re
import urllib.parse
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

PROVIDER_DATE_FORMAT = "%d/%m/%Y"


def validate_endpoint_url(url: str) -> bool:
    """
    Validate that a URL is an absolute http(s) URL.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False

    parsed = urllib.parse.urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_timezone(name: str) -> bool:
    """
    Validate an IANA time zone name (e.g. 'America/Guatemala').

    Args:
        name: Time zone name to validate

    Returns:
        True if the zone can be loaded, False otherwise
    """
    if not name:
        return False

    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def validate_currency_symbol(symbol: str) -> bool:
    """
    Validate a 3-letter currency symbol such as 'USD'.

    Args:
        symbol: Symbol to validate (case-sensitive, upper case expected)

    Returns:
        True if valid, False otherwise
    """
    if not symbol:
        return False

    return bool(re.match(r'^[A-Z]{3}$', symbol))


def validate_provider_date(value: str) -> bool:
    """
    Validate a date string in the provider's dd/mm/yyyy format.

    Args:
        value: Date string to validate

    Returns:
        True if valid, False otherwise
    """
    if not value or not re.match(r'^\d{2}/\d{2}/\d{4}$', value):
        return False

    try:
        datetime.strptime(value, PROVIDER_DATE_FORMAT)
    except ValueError:
        return False
    return True
