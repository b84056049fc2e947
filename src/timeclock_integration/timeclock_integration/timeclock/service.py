from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import parse_config_date
from ..core.enums import EmployeeImportStatus
from ..core.exceptions import DomainFault, InternalError, ParsingError, TransportError, ValidationError
from ..users.model import Employee
from ..users.repository import EmployeeDirectory
from .fetcher import FallbackFetcher
from .indexer import ResponseIndexer
from .model import DateRange, EmployeeImportResult, ImportReport, OrganizationIdentifiers, TimeClockRecord
from .repository import TimeClockRepository

logger = logging.getLogger(__name__)


class TimeClockImportService:
    """Reconciles the local time_clock table with the remote service for a date range.

    Every day in the range is cleared for all users first, then each employee's
    days are rewritten from the remote data. An employee whose fetch fails keeps
    no records for the range.
    """

    def __init__(
        self,
        time_clock: TimeClockRepository,
        fetcher: FallbackFetcher,
        organizations: OrganizationIdentifiers,
        *,
        directory: Optional[EmployeeDirectory] = None,
        allowed_after_date: Optional[str] = None,
        indexer: Optional[ResponseIndexer] = None,
        max_workers: int = 1,
        cancel_event: Optional[threading.Event] = None,
    ):
        self._time_clock = time_clock
        self._fetcher = fetcher
        self._organizations = organizations
        self._directory = directory
        self._allowed_after_date = allowed_after_date
        self._indexer = indexer or ResponseIndexer()
        self._max_workers = max(int(max_workers), 1)
        self._cancel = cancel_event or threading.Event()

    def cancel(self) -> None:
        self._cancel.set()

    def import_from_directory(self, date_range: DateRange) -> ImportReport:
        if self._directory is None:
            raise ValidationError("No employee directory configured")
        self._validate_lower_bound(date_range)
        return self._reconcile(date_range, self._directory.list_eligible())

    def import_range(self, date_range: DateRange, employees: Iterable[Employee]) -> ImportReport:
        self._validate_lower_bound(date_range)
        return self._reconcile(date_range, employees)

    def _reconcile(self, date_range: DateRange, employees: Iterable[Employee]) -> ImportReport:
        employees = list(employees)
        if not employees:
            raise ValidationError("No eligible employees to synchronize; register their CPF first")

        logger.info(
            "Importing time clock %s..%s for %d employees",
            date_range.start,
            date_range.end,
            len(employees),
        )

        if self._cancel.is_set():
            logger.info("Time clock import %s..%s cancelled before any change", date_range.start, date_range.end)
            return ImportReport(date_range=date_range, cancelled=True)

        for day in date_range:
            self._time_clock.delete_for_date(day)

        report = ImportReport(date_range=date_range)
        report.results = self._run(date_range, employees)
        report.cancelled = self._cancel.is_set()

        logger.info(
            "Time clock import %s..%s finished: %d imported, %d skipped%s",
            date_range.start,
            date_range.end,
            len(report.imported),
            len(report.skipped),
            " (cancelled)" if report.cancelled else "",
        )
        return report

    def _run(self, date_range: DateRange, employees: Sequence[Employee]) -> list[EmployeeImportResult]:
        if self._max_workers == 1 or len(employees) == 1:
            return [self.import_employee(date_range, e) for e in employees]

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            return list(pool.map(lambda e: self.import_employee(date_range, e), employees))

    def import_employee(self, date_range: DateRange, employee: Employee) -> EmployeeImportResult:
        if self._cancel.is_set():
            return EmployeeImportResult(employee.user_id, EmployeeImportStatus.CANCELLED)

        try:
            fetched = self._fetcher.fetch(date_range, employee.cpf, self._organizations)
        except DomainFault as e:
            logger.warning("Skipping user_id=%s: %s", employee.user_id, e.message)
            return EmployeeImportResult(employee.user_id, EmployeeImportStatus.DOMAIN_FAULT, error=e.message)
        except TransportError as e:
            logger.error("Skipping user_id=%s, transport failure: %s", employee.user_id, e)
            return EmployeeImportResult(employee.user_id, EmployeeImportStatus.TRANSPORT_ERROR, error=str(e))
        except InternalError as e:
            logger.error("Skipping user_id=%s, remote service anomaly: %s", employee.user_id, e)
            return EmployeeImportResult(employee.user_id, EmployeeImportStatus.INTERNAL_ERROR, error=str(e))

        index = self._indexer.index(fetched.response)
        result = EmployeeImportResult(
            employee.user_id,
            EmployeeImportStatus.IMPORTED,
            organization=fetched.organization,
        )

        # Once fetched, every day is rewritten even if a cancel arrives meanwhile.
        for day in date_range:
            try:
                duration = self._indexer.duration_for_day(index, day)
            except ParsingError as e:
                logger.warning("user_id=%s: %s", employee.user_id, e)
                result.days_skipped.append(day)
                continue
            self._time_clock.save(TimeClockRecord(date=day, user_id=employee.user_id, time=duration))
            result.days_written += 1

        return result

    def _validate_lower_bound(self, date_range: DateRange) -> None:
        if not self._allowed_after_date:
            return
        try:
            lower = parse_config_date(self._allowed_after_date)
        except ValueError:
            raise ValidationError("Invalid lower-bound date configured for the Primeponto integration")
        if date_range.start < lower:
            raise ValidationError(
                "Requested start date precedes the allowed Primeponto integration start date "
                f"({lower:%Y-%m-%d})"
            )
