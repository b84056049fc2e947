from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Optional, Protocol

import requests

from ..core.constants import DEFAULT_PRIMEPONTO_BASE_URL, DEFAULT_PRIMEPONTO_TIMEOUT
from ..core.exceptions import DomainFault, TransportError
from .model import DateRange, FolhaPontoResponse
from .soap import build_folha_ponto_envelope, find_fault, parse_envelope, parse_folha_ponto

logger = logging.getLogger(__name__)


class RemoteTimeService(Protocol):
    """Remote source of punches and worked minutes per day."""

    thread_safe: bool

    def fetch_punches(self, date_range: DateRange, cpf: str, cnpj: str) -> Optional[FolhaPontoResponse]:
        """Return the parsed response, or None when the service answered with an empty body
        or an envelope without a ``return`` element.

        Raises DomainFault for SOAP faults and TransportError for connectivity/protocol failures.
        """

        raise NotImplementedError


class PrimepontoClient(RemoteTimeService):
    """SOAP client for the Primeponto ``folha`` gateway."""

    # requests.Session gives no thread-safety guarantee.
    thread_safe = False

    def __init__(
        self,
        *,
        login: str,
        password: str,
        context: str,
        base_url: str = DEFAULT_PRIMEPONTO_BASE_URL,
        timeout: float = DEFAULT_PRIMEPONTO_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.url = f"{base_url.rstrip('/')}/{context}_gateway/folha"
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.auth = (login, password)
        self._session.headers.update(
            {
                "Content-Type": "text/xml; charset=utf-8",
                "SOAPAction": '""',
                "Accept": "text/xml",
            }
        )

    def __enter__(self) -> "PrimepontoClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def fetch_punches(self, date_range: DateRange, cpf: str, cnpj: str) -> Optional[FolhaPontoResponse]:
        envelope = build_folha_ponto_envelope(date_range, cpf, cnpj)
        logger.debug("folhaPonto cpf=%s cnpj=%s %s..%s", cpf, cnpj, date_range.start, date_range.end)

        try:
            r = self._session.post(self.url, data=envelope, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"folhaPonto request failed: {e}") from e

        if not r.content or not r.content.strip():
            if 200 <= r.status_code < 300:
                return None
            raise TransportError(f"folhaPonto failed ({r.status_code}) with empty body")

        try:
            root = parse_envelope(r.content)
        except ET.ParseError as e:
            snippet = r.text[:500] if r.text else ""
            raise TransportError(f"folhaPonto returned invalid XML ({r.status_code}): {snippet}") from e

        fault = find_fault(root)
        if fault is not None:
            raise DomainFault(fault)

        if not 200 <= r.status_code < 300:
            raise TransportError(f"folhaPonto failed ({r.status_code}): {r.text[:500]}")

        return parse_folha_ponto(root)
