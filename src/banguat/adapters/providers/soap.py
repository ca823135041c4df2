# src/banguat/adapters/providers/soap.py
"""
SOAP 1.1 Transport for the Banguat Web Service

This module performs a single SOAP round trip: it builds the request envelope,
POSTs it with requests, parses the reply with lxml and hands back the
<Operation>Result element. Every failure along the way is reported as
UnknownError carrying the provider's fault message.

Files that USE this module:
- banguat.adapters.providers.banguat (BanguatProvider issues calls through SoapTransport)
- banguat.app (composition root builds the transport from settings)
- tests.test_providers (unit tests)

Files that this module USES:
- banguat.config (settings for endpoint, namespace, timeout, TLS verification)
- banguat.domain.errors (UnknownError)
"""
import logging
from typing import Any, Mapping, Optional

import requests
from lxml import etree

from banguat.config import settings
from banguat.domain.errors import UnknownError

log = logging.getLogger(__name__)

SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"

# No DTD entity expansion or network fetches while parsing replies
_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


class SoapTransport:
    """Minimal SOAP 1.1 client for a document/literal ASMX service."""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        namespace: Optional[str] = None,
        timeout: Optional[int] = None,
        verify_ssl: Optional[bool] = None,
    ):
        """
        Initialize the transport.

        Args:
            endpoint: Service URL (defaults to settings.endpoint)
            namespace: Target namespace of the operations (defaults to settings.namespace)
            timeout: HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            verify_ssl: Verify TLS certificates (defaults to settings.verify_ssl)
        """
        self.endpoint = endpoint or settings.endpoint
        self.namespace = namespace or settings.namespace
        self.timeout = timeout or settings.http_timeout_seconds
        self.verify_ssl = settings.verify_ssl if verify_ssl is None else verify_ssl

    def qname(self, tag: str) -> str:
        """Qualify a tag with the service namespace."""
        return f"{{{self.namespace}}}{tag}"

    def path(self, *tags: str) -> str:
        """Build a namespace-qualified ElementPath from child tags."""
        return "/".join(self.qname(tag) for tag in tags)

    def build_envelope(self, operation: str, params: Optional[Mapping[str, Any]] = None) -> bytes:
        """
        Serialize a SOAP envelope for ``operation`` with ``params`` as child elements.

        Returns:
            UTF-8 encoded XML document
        """
        envelope = etree.Element(etree.QName(SOAP_ENV_NS, "Envelope"), nsmap={"soap": SOAP_ENV_NS})
        body = etree.SubElement(envelope, etree.QName(SOAP_ENV_NS, "Body"))
        request = etree.SubElement(body, self.qname(operation), nsmap={None: self.namespace})
        for name, value in (params or {}).items():
            etree.SubElement(request, self.qname(name)).text = str(value)
        return etree.tostring(envelope, xml_declaration=True, encoding="utf-8")

    def _soap_action(self, operation: str) -> str:
        prefix = self.namespace if self.namespace.endswith("/") else self.namespace + "/"
        return f'"{prefix}{operation}"'

    def call(self, operation: str, params: Optional[Mapping[str, Any]] = None) -> etree._Element:
        """
        Invoke ``operation`` and return its <operation>Result element.

        Args:
            operation: SOAP operation name (e.g. 'TipoCambioRango')
            params: Request parameters, serialized in the given order

        Returns:
            The result element; its content may be empty

        Raises:
            UnknownError: On timeouts, connection errors, HTTP errors, invalid XML,
                SOAP faults or a reply without a result element
        """
        headers = {
            "Content-Type": "text/xml; charset=utf-8",
            "SOAPAction": self._soap_action(operation),
        }
        try:
            log.info("Calling Banguat %s %s", operation, dict(params or {}))
            resp = requests.post(
                self.endpoint,
                data=self.build_envelope(operation, params),
                headers=headers,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.exceptions.Timeout as e:
            log.error("Banguat %s timeout after %d seconds", operation, self.timeout)
            raise UnknownError(f"Banguat {operation} timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            log.error("Banguat %s request failed: %s", operation, e)
            raise UnknownError(f"Banguat {operation} request failed: {e}") from e

        # ASMX reports faults with HTTP 500 and a SOAP body, so parse before checking status
        try:
            root = etree.fromstring(resp.content, parser=_PARSER)
        except (etree.XMLSyntaxError, ValueError) as e:
            if resp.status_code >= 400:
                log.error("Banguat %s HTTP error %d", operation, resp.status_code)
                raise UnknownError(f"Banguat {operation} HTTP error {resp.status_code}") from e
            log.error("Banguat %s returned invalid XML: %s", operation, e)
            raise UnknownError(f"Banguat {operation} returned invalid XML: {e}") from e

        fault = root.find(f".//{{{SOAP_ENV_NS}}}Fault")
        if fault is not None:
            fault_string = (fault.findtext("faultstring") or "").strip() or "Unknown SOAP fault"
            fault_code = (fault.findtext("faultcode") or "").strip() or None
            log.error("Banguat %s fault (%s): %s", operation, fault_code, fault_string)
            raise UnknownError(fault_string, fault_code=fault_code)

        if resp.status_code >= 400:
            log.error("Banguat %s HTTP error %d", operation, resp.status_code)
            raise UnknownError(f"Banguat {operation} HTTP error {resp.status_code}")

        result = root.find(f".//{self.qname(operation + 'Result')}")
        if result is None:
            log.error("Banguat %s response missing %sResult element", operation, operation)
            raise UnknownError(f"Banguat {operation} response missing {operation}Result")

        log.debug("Banguat %s answered", operation)
        return result
