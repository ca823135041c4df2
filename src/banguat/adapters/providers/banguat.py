# src/banguat/adapters/providers/banguat.py
"""
Banguat Exchange Rate Provider

This module implements the RateProvider contract on top of the Banco de
Guatemala "TipoCambio" web service. It only shapes requests and turns the
nested XML replies into typed records; business rules live in
ExchangeRateService.

Reply shapes handled here:
  TipoCambioDiaResult/CambioDolar/VarDolar        {fecha, referencia}
  VariablesDisponiblesResult/Variables/Variable   {moneda, descripcion}
  TipoCambioRango[Moneda]Result/Vars/Var          {moneda, fecha, venta, compra}

Files that USE this module:
- banguat.app (composition root wires BanguatProvider into the service)
- tests.test_providers (unit tests)

Files that this module USES:
- banguat.adapters.providers.base (RateProvider interface)
- banguat.adapters.providers.soap (SoapTransport for round trips)
- banguat.domain (records, code table, UnknownError)
- banguat.shared.dates (dd/mm/yyyy formatting and parsing)
- banguat.shared.validators (dd/mm/yyyy validation of reply dates)
"""
import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Sequence

from lxml import etree

from banguat.adapters.providers.base import RateProvider
from banguat.adapters.providers.soap import SoapTransport
from banguat.domain.currencies import USD_CODE, symbol_of
from banguat.domain.errors import UnknownError
from banguat.domain.models import CurrencyInfo, DateRange, RateQuote
from banguat.shared.dates import format_provider_date, parse_provider_date
from banguat.shared.validators import validate_provider_date

log = logging.getLogger(__name__)


class BanguatProvider(RateProvider):
    """Client for the four Banguat rate queries."""

    def __init__(self, transport: Optional[SoapTransport] = None):
        """
        Initialize the provider.

        Args:
            transport: SOAP transport to use (defaults to one built from settings)
        """
        self.transport = transport or SoapTransport()

    # --- parsing helpers -------------------------------------------------

    def _fields(self, node: etree._Element, required: Sequence[str]) -> Optional[Dict[str, str]]:
        """
        Collect the text of required child leaves.

        Returns None (and logs) when any leaf is absent or empty, so that
        incomplete records are dropped instead of filled with defaults.
        """
        values: Dict[str, str] = {}
        for name in required:
            text = node.findtext(self.transport.qname(name))
            if text is None or not text.strip():
                log.warning("Banguat record missing '%s', skipping: %s",
                            name, etree.tostring(node, encoding="unicode"))
                return None
            values[name] = text.strip()
        return values

    @staticmethod
    def _to_decimal(value: str, field: str) -> Decimal:
        try:
            return Decimal(value)
        except InvalidOperation as e:
            log.error("Banguat returned non-numeric %s: %r", field, value)
            raise UnknownError(f"Banguat returned non-numeric {field}: {value!r}") from e

    @staticmethod
    def _to_int(value: str, field: str) -> int:
        try:
            return int(value)
        except ValueError as e:
            log.error("Banguat returned non-integer %s: %r", field, value)
            raise UnknownError(f"Banguat returned non-integer {field}: {value!r}") from e

    @staticmethod
    def _to_date(value: str) -> date:
        if not validate_provider_date(value):
            log.error("Banguat returned invalid date: %r", value)
            raise UnknownError(f"Banguat returned invalid date: {value!r}")
        return parse_provider_date(value)

    # --- queries ---------------------------------------------------------

    def fetch_today_rate(self) -> Optional[RateQuote]:
        """
        Get today's official USD reference rate.

        The provider publishes a single reference value, so buy and sell are
        both set to it.

        Returns:
            RateQuote for USD, or None if the provider has no rate for today

        Raises:
            UnknownError: On transport faults or malformed values
        """
        result = self.transport.call("TipoCambioDia")
        node = result.find(self.transport.path("CambioDolar", "VarDolar"))
        if node is None:
            log.info("Banguat has no reference rate for today")
            return None

        fields = self._fields(node, ("fecha", "referencia"))
        if fields is None:
            return None

        reference = self._to_decimal(fields["referencia"], "referencia")
        return RateQuote(
            provider_code=USD_CODE,
            date=self._to_date(fields["fecha"]),
            buy=reference,
            sell=reference,
        )

    def fetch_available_currencies(self) -> List[CurrencyInfo]:
        """
        Get every currency the provider currently quotes.

        Returns:
            CurrencyInfo list in provider order; symbol is None for codes
            missing from the local code table

        Raises:
            UnknownError: On transport faults or malformed values
        """
        result = self.transport.call("VariablesDisponibles")
        currencies: List[CurrencyInfo] = []
        for node in result.iterfind(self.transport.path("Variables", "Variable")):
            fields = self._fields(node, ("moneda", "descripcion"))
            if fields is None:
                continue
            code = self._to_int(fields["moneda"], "moneda")
            currencies.append(CurrencyInfo(
                provider_code=code,
                symbol=symbol_of(code),
                display_name=fields["descripcion"],
            ))
        log.debug("Banguat currencies fetched: %d", len(currencies))
        return currencies

    def fetch_rate_range(
        self, date_range: DateRange, provider_code: Optional[int] = None
    ) -> List[RateQuote]:
        """
        Get buy/sell quotes for every day in ``date_range``.

        Args:
            date_range: Inclusive range of days with both ends set
            provider_code: Restrict to one currency; all currencies when None

        Returns:
            Quotes in provider order, empty if the provider has nothing in range

        Raises:
            ValueError: If the range still has an open end
            UnknownError: On transport faults or malformed values
        """
        if not date_range.is_resolved:
            raise ValueError("DateRange must be resolved to concrete dates before querying")

        params = {
            "fechainit": format_provider_date(date_range.start),
            "fechafin": format_provider_date(date_range.end),
        }
        if provider_code is None:
            operation = "TipoCambioRango"
            required = ("moneda", "fecha", "venta", "compra")
        else:
            operation = "TipoCambioRangoMoneda"
            params["moneda"] = int(provider_code)
            # moneda is implied by the request
            required = ("fecha", "venta", "compra")

        result = self.transport.call(operation, params)
        quotes: List[RateQuote] = []
        for node in result.iterfind(self.transport.path("Vars", "Var")):
            fields = self._fields(node, required)
            if fields is None:
                continue
            moneda = node.findtext(self.transport.qname("moneda"))
            if moneda is not None and moneda.strip():
                code = self._to_int(moneda.strip(), "moneda")
            else:
                code = int(provider_code)
            quotes.append(RateQuote(
                provider_code=code,
                date=self._to_date(fields["fecha"]),
                buy=self._to_decimal(fields["compra"], "compra"),
                sell=self._to_decimal(fields["venta"], "venta"),
            ))
        log.debug("Banguat %s returned %d quotes", operation, len(quotes))
        return quotes
