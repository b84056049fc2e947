from __future__ import annotations

from datetime import date

import pytest

from src.timeclock_integration.timeclock_integration.core.exceptions import (
    DomainFault,
    InternalError,
    TransportError,
)
from src.timeclock_integration.timeclock_integration.timeclock.fetcher import FallbackFetcher, decide_fallback
from src.timeclock_integration.timeclock_integration.timeclock.model import DateRange, OrganizationIdentifiers

from conftest import FakeTransport, make_response

CPF = "123.456.789-00"
PRIMARY = "11.111.111/0001-01"
SECONDARY = "22.222.222/0001-02"
RANGE = DateRange(date(2024, 1, 8), date(2024, 1, 10))
BOTH = OrganizationIdentifiers(primary=PRIMARY, secondary=SECONDARY)


def test_primary_success_does_not_touch_secondary():
    response = make_response({"2024-01-08": 480})
    transport = FakeTransport({(CPF, PRIMARY): response})

    result = FallbackFetcher(transport).fetch(RANGE, CPF, BOTH)

    assert result.response is response
    assert result.organization == PRIMARY
    assert transport.calls == [(CPF, PRIMARY)]


def test_no_contract_fault_falls_back_to_secondary(no_contract_fault):
    response = make_response({"2024-01-08": 480})
    transport = FakeTransport({(CPF, PRIMARY): no_contract_fault, (CPF, SECONDARY): response})

    result = FallbackFetcher(transport).fetch(RANGE, CPF, BOTH)

    assert result.response is response
    assert result.organization == SECONDARY
    assert transport.calls == [(CPF, PRIMARY), (CPF, SECONDARY)]


def test_no_contract_fault_without_secondary_propagates(no_contract_fault):
    transport = FakeTransport({(CPF, PRIMARY): no_contract_fault})

    with pytest.raises(DomainFault) as exc:
        FallbackFetcher(transport).fetch(RANGE, CPF, OrganizationIdentifiers(primary=PRIMARY))

    assert exc.value is no_contract_fault
    assert transport.calls == [(CPF, PRIMARY)]


def test_other_fault_is_not_retried():
    fault = DomainFault("Falha ao executar consulta: Período inválido")
    transport = FakeTransport({(CPF, PRIMARY): fault, (CPF, SECONDARY): make_response({})})

    with pytest.raises(DomainFault):
        FallbackFetcher(transport).fetch(RANGE, CPF, BOTH)

    assert transport.calls == [(CPF, PRIMARY)]


def test_secondary_failure_propagates(no_contract_fault):
    second = DomainFault(no_contract_fault.message)
    transport = FakeTransport({(CPF, PRIMARY): no_contract_fault, (CPF, SECONDARY): second})

    with pytest.raises(DomainFault) as exc:
        FallbackFetcher(transport).fetch(RANGE, CPF, BOTH)

    assert exc.value is second
    assert len(transport.calls) == 2


def test_transport_error_is_never_retried():
    transport = FakeTransport({(CPF, PRIMARY): TransportError("timeout"), (CPF, SECONDARY): make_response({})})

    with pytest.raises(TransportError):
        FallbackFetcher(transport).fetch(RANGE, CPF, BOTH)

    assert transport.calls == [(CPF, PRIMARY)]


def test_empty_response_is_internal_error():
    transport = FakeTransport({(CPF, PRIMARY): None})

    with pytest.raises(InternalError, match="empty response"):
        FallbackFetcher(transport).fetch(RANGE, CPF, BOTH)


@pytest.mark.parametrize(
    "message",
    [
        "Falha ao executar consulta: Funcionário não possui contrato neste CNPJ",
        "FUNCIONARIO NAO POSSUI CONTRATO NESTE CNPJ",
        "Funcionário não possui contrato neste cnpj.",
    ],
)
def test_decide_fallback_matches_no_contract_variants(message):
    assert decide_fallback(DomainFault(message), BOTH) == SECONDARY


def test_decide_fallback_gives_up_on_other_faults_or_missing_secondary(no_contract_fault):
    assert decide_fallback(DomainFault("CPF inválido"), BOTH) is None
    assert decide_fallback(no_contract_fault, OrganizationIdentifiers(primary=PRIMARY)) is None
