from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_IMPORT_MAX_WORKERS, DEFAULT_PRIMEPONTO_BASE_URL, DEFAULT_PRIMEPONTO_TIMEOUT
from .database.connection import DBConfig, DatabaseConnection
from .settings.mysql_config_repository import MySQLConfigRepository
from .settings.service import PrimepontoSettings, load_primeponto_settings
from .timeclock.client import PrimepontoClient
from .timeclock.fetcher import FallbackFetcher
from .timeclock.model import DateRange, ImportReport
from .timeclock.mysql_time_clock_repository import MySQLTimeClockRepository
from .timeclock.service import TimeClockImportService
from .users.mysql_user_repository import MySQLUserRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    configs_repo: MySQLConfigRepository
    users_repo: MySQLUserRepository
    time_clock_repo: MySQLTimeClockRepository

    primeponto_base_url: str = DEFAULT_PRIMEPONTO_BASE_URL
    primeponto_timeout: float = DEFAULT_PRIMEPONTO_TIMEOUT
    import_max_workers: int = DEFAULT_IMPORT_MAX_WORKERS

    def build_client(self, settings: PrimepontoSettings) -> PrimepontoClient:
        return PrimepontoClient(
            login=settings.login,
            password=settings.password,
            context=settings.context,
            base_url=self.primeponto_base_url,
            timeout=self.primeponto_timeout,
        )

    def import_time_clock(
        self,
        date_range: DateRange,
        *,
        max_workers: Optional[int] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> ImportReport:
        """Run a full Primeponto import for ``date_range``.

        Settings are read from the configs table on every call, so changes made
        by an administrator apply to the next import. Raises ConfigurationError
        or ValidationError before touching the time_clock table.
        """
        settings = load_primeponto_settings(self.configs_repo)
        with self.build_client(settings) as client:
            service = TimeClockImportService(
                self.time_clock_repo,
                FallbackFetcher(client),
                settings.organizations,
                directory=self.users_repo,
                allowed_after_date=settings.allowed_after_date,
                max_workers=max_workers or self.import_max_workers,
                cancel_event=cancel_event,
            )
            return service.import_from_directory(date_range)


def build_container(*, db_config: dict, settings=None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return Container(
        conn=conn,
        configs_repo=MySQLConfigRepository(conn),
        users_repo=MySQLUserRepository(conn),
        time_clock_repo=MySQLTimeClockRepository(conn),
        primeponto_base_url=str(getattr(settings, "PRIMEPONTO_BASE_URL", DEFAULT_PRIMEPONTO_BASE_URL)),
        primeponto_timeout=float(getattr(settings, "PRIMEPONTO_TIMEOUT", DEFAULT_PRIMEPONTO_TIMEOUT)),
        import_max_workers=int(getattr(settings, "IMPORT_MAX_WORKERS", DEFAULT_IMPORT_MAX_WORKERS)),
    )
