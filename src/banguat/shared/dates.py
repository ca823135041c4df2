"""
Date Utilities - Provider Date Format and Local Clock

Banguat publishes rates per Guatemala-local day and exchanges dates as
dd/mm/yyyy strings. These helpers keep both concerns in one place.

Files that USE this module:
- banguat.adapters.providers.banguat (formats request dates, parses fecha)
- banguat.app (builds the service clock from settings.timezone)

Files that this module USES:
- banguat.shared.validators (PROVIDER_DATE_FORMAT)
"""
from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

from banguat.shared.validators import PROVIDER_DATE_FORMAT


def format_provider_date(day: date) -> str:
    """Format a date as dd/mm/yyyy."""
    return day.strftime(PROVIDER_DATE_FORMAT)


def parse_provider_date(value: str) -> date:
    """
    Parse a dd/mm/yyyy string into a date.

    Raises:
        ValueError: If the string does not match the format
    """
    return datetime.strptime(value.strip(), PROVIDER_DATE_FORMAT).date()


def local_clock(tz_name: str) -> Callable[[], date]:
    """Return a zero-argument callable giving today's date in ``tz_name``."""
    zone = ZoneInfo(tz_name)

    def _today() -> date:
        return datetime.now(zone).date()

    return _today
