from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterator, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import EmployeeImportStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise ValidationError("Start date must not be after end date")

    @classmethod
    def parse(cls, start: str, end: Optional[str] = None) -> "DateRange":
        try:
            start_d = parse_iso_date(start)
            end_d = parse_iso_date(end) if end else start_d
        except (TypeError, ValueError):
            raise ValidationError("Dates must use the YYYY-MM-DD format")
        return cls(start_d, end_d)

    def __iter__(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1


@dataclass(frozen=True)
class OrganizationIdentifiers:
    """CNPJs the employee may be contracted under, tried in order."""

    primary: str
    secondary: Optional[str] = None


@dataclass(frozen=True)
class Punch:
    data_hora: str
    tipo: Optional[str] = None
    rep: Optional[str] = None
    justificativa: Optional[str] = None


@dataclass(frozen=True)
class DayRecord:
    """One ``itens`` entry of a folhaPonto response.

    ``data`` is the raw xs:dateTime text; ``htr`` is worked minutes for the day.
    """

    data: str
    htr: Optional[float]
    punches: tuple[Punch, ...] = ()


@dataclass(frozen=True)
class FolhaPontoResponse:
    cnpj: Optional[str]
    pis: Optional[str]
    days: tuple[DayRecord, ...] = ()


@dataclass(frozen=True)
class FetchResult:
    response: FolhaPontoResponse
    organization: str


@dataclass(frozen=True)
class TimeClockRecord:
    """Worked time of one user on one day; unique per (date, user_id)."""

    date: date
    user_id: int
    time: str


@dataclass
class EmployeeImportResult:
    user_id: int
    status: EmployeeImportStatus
    organization: Optional[str] = None
    days_written: int = 0
    days_skipped: list[date] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "status": self.status.value,
            "organization": self.organization,
            "days_written": self.days_written,
            "days_skipped": [d.strftime("%Y-%m-%d") for d in self.days_skipped],
            "error": self.error,
        }


@dataclass
class ImportReport:
    """Result of one import call. Truthy once every employee was attempted."""

    date_range: DateRange
    results: list[EmployeeImportResult] = field(default_factory=list)
    cancelled: bool = False

    def __bool__(self) -> bool:
        return not self.cancelled

    @property
    def imported(self) -> list[EmployeeImportResult]:
        return [r for r in self.results if r.status == EmployeeImportStatus.IMPORTED]

    @property
    def skipped(self) -> list[EmployeeImportResult]:
        return [r for r in self.results if r.status != EmployeeImportStatus.IMPORTED]

    def to_dict(self) -> dict:
        return {
            "start": self.date_range.start.strftime("%Y-%m-%d"),
            "end": self.date_range.end.strftime("%Y-%m-%d"),
            "cancelled": self.cancelled,
            "imported": len(self.imported),
            "skipped": len(self.skipped),
            "employees": [r.to_dict() for r in self.results],
        }
