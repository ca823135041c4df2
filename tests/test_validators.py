"""
Validator Tests - Unit Tests for Validation and Date Helpers

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- banguat.shared.validators (validation functions for testing)
- banguat.shared.dates (provider date helpers for testing)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from datetime import date  # Expected dates

from banguat.shared.dates import format_provider_date, local_clock, parse_provider_date
from banguat.shared.validators import (
    validate_currency_symbol,
    validate_endpoint_url,
    validate_provider_date,
    validate_timezone,
)


class TestValidateEndpointUrl:
    def test_valid(self):
        assert validate_endpoint_url("https://www.banguat.gob.gt/variables/ws/TipoCambio.asmx")
        assert validate_endpoint_url("http://localhost:8080/ws")

    @pytest.mark.parametrize("url", ["", "ftp://example.com", "www.banguat.gob.gt", "https://"])
    def test_invalid(self, url):
        assert not validate_endpoint_url(url)


class TestValidateTimezone:
    def test_valid(self):
        assert validate_timezone("America/Guatemala")
        assert validate_timezone("UTC")

    @pytest.mark.parametrize("name", ["", "Mars/Olympus_Mons", "../etc/passwd"])
    def test_invalid(self, name):
        assert not validate_timezone(name)


class TestValidateCurrencySymbol:
    def test_valid(self):
        assert validate_currency_symbol("GTQ")

    @pytest.mark.parametrize("symbol", ["", "gtq", "GT", "GTQQ", "G1Q"])
    def test_invalid(self, symbol):
        assert not validate_currency_symbol(symbol)


class TestValidateProviderDate:
    def test_valid(self):
        assert validate_provider_date("19/10/2026")
        assert validate_provider_date("29/02/2024")

    @pytest.mark.parametrize("value", ["", "2026-10-19", "19/10/26", "31/02/2026", "1/10/2026"])
    def test_invalid(self, value):
        assert not validate_provider_date(value)


class TestProviderDates:
    def test_format(self):
        assert format_provider_date(date(2026, 1, 5)) == "05/01/2026"

    def test_parse(self):
        assert parse_provider_date(" 05/01/2026 ") == date(2026, 1, 5)

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_provider_date("2026-01-05")

    def test_local_clock(self):
        today = local_clock("America/Guatemala")
        assert isinstance(today(), date)
