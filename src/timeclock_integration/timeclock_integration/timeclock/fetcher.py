from __future__ import annotations

import logging
import threading
import unicodedata
from typing import Optional

from ..core.constants import NO_CONTRACT_MARKER
from ..core.exceptions import DomainFault, InternalError
from .client import RemoteTimeService
from .model import DateRange, FetchResult, OrganizationIdentifiers

logger = logging.getLogger(__name__)


def _normalize(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def is_no_contract_fault(fault: DomainFault) -> bool:
    return NO_CONTRACT_MARKER in _normalize(fault.message or "")


def decide_fallback(fault: DomainFault, organizations: OrganizationIdentifiers) -> Optional[str]:
    """Organization to retry with after ``fault`` on the primary, or None to give up."""
    if organizations.secondary and is_no_contract_fault(fault):
        return organizations.secondary
    return None


class FallbackFetcher:
    """Fetches an employee's punches, trying the secondary CNPJ once when the
    employee has no contract under the primary one.

    Transport errors are never retried.
    """

    def __init__(self, transport: RemoteTimeService):
        self._transport = transport
        self._lock: Optional[threading.Lock] = None
        if not getattr(transport, "thread_safe", False):
            self._lock = threading.Lock()

    def fetch(self, date_range: DateRange, cpf: str, organizations: OrganizationIdentifiers) -> FetchResult:
        try:
            return self._attempt(date_range, cpf, organizations.primary)
        except DomainFault as fault:
            secondary = decide_fallback(fault, organizations)
            if secondary is None:
                raise
            logger.info("cpf=%s has no contract under %s, retrying with %s", cpf, organizations.primary, secondary)

        return self._attempt(date_range, cpf, secondary)

    def _attempt(self, date_range: DateRange, cpf: str, cnpj: str) -> FetchResult:
        if self._lock is None:
            response = self._transport.fetch_punches(date_range, cpf, cnpj)
        else:
            with self._lock:
                response = self._transport.fetch_punches(date_range, cpf, cnpj)

        if response is None:
            raise InternalError("Unexpected empty response from remote service")
        return FetchResult(response=response, organization=cnpj)
