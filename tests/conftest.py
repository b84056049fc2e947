from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.timeclock_integration.timeclock_integration.core.constants import NO_CONTRACT_FAULT
from src.timeclock_integration.timeclock_integration.core.exceptions import DomainFault
from src.timeclock_integration.timeclock_integration.timeclock.model import (
    DayRecord,
    FolhaPontoResponse,
    TimeClockRecord,
)


def make_response(htr_by_day: dict[str, float], *, cnpj: Optional[str] = None) -> FolhaPontoResponse:
    return FolhaPontoResponse(
        cnpj=cnpj,
        pis="12883990532",
        days=tuple(DayRecord(data=f"{d}T00:00:00-03:00", htr=htr) for d, htr in htr_by_day.items()),
    )


class InMemoryTimeClock:
    def __init__(self, records: Optional[list[TimeClockRecord]] = None):
        self.records: dict[tuple[date, int], TimeClockRecord] = {}
        self.calls: list[tuple] = []
        for r in records or []:
            self.records[(r.date, r.user_id)] = r

    def delete_for_date(self, work_date: date) -> None:
        self.calls.append(("delete", work_date))
        for key in [k for k in self.records if k[0] == work_date]:
            del self.records[key]

    def save(self, record: TimeClockRecord) -> None:
        self.calls.append(("save", record.date, record.user_id))
        self.records[(record.date, record.user_id)] = record

    def as_set(self) -> set[tuple[date, int, str]]:
        return {(r.date, r.user_id, r.time) for r in self.records.values()}


class FakeTransport:
    """Answers by (cpf, cnpj); values are responses, None, or exceptions to raise."""

    thread_safe = False

    def __init__(self, answers: dict[tuple[str, str], object]):
        self.answers = answers
        self.calls: list[tuple[str, str]] = []

    def fetch_punches(self, date_range, cpf, cnpj):
        self.calls.append((cpf, cnpj))
        answer = self.answers.get((cpf, cnpj), DomainFault("Funcionário não encontrado"))
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def no_contract_fault() -> DomainFault:
    return DomainFault(NO_CONTRACT_FAULT)
