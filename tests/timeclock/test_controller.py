from __future__ import annotations

from datetime import date

import pytest

from src.timeclock_integration.timeclock_integration.core.enums import EmployeeImportStatus
from src.timeclock_integration.timeclock_integration.core.exceptions import ConfigurationError, ValidationError
from src.timeclock_integration.timeclock_integration.main import create_app
from src.timeclock_integration.timeclock_integration.timeclock.model import EmployeeImportResult, ImportReport


class FakeContainer:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.ranges = []

    def import_time_clock(self, date_range, **kwargs):
        self.ranges.append(date_range)
        if self.error:
            raise self.error
        report = ImportReport(date_range=date_range)
        report.results = [EmployeeImportResult(1, EmployeeImportStatus.IMPORTED, organization="11", days_written=3)]
        return report


@pytest.fixture
def make_client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    def _make(container):
        app = create_app(container=container)
        app.config["TESTING"] = True
        return app, app.test_client()

    return _make


def test_import_returns_report(make_client):
    container = FakeContainer()
    _, client = make_client(container)

    resp = client.post("/integrations/primeponto/import", json={"start": "2024-01-08", "end": "2024-01-10"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["report"]["imported"] == 1
    assert body["report"]["employees"][0]["days_written"] == 3
    assert container.ranges[0].start == date(2024, 1, 8)
    assert container.ranges[0].end == date(2024, 1, 10)


def test_end_defaults_to_start(make_client):
    container = FakeContainer()
    _, client = make_client(container)

    resp = client.post("/integrations/primeponto/import", data={"start": "2024-01-08"})

    assert resp.status_code == 200
    assert container.ranges[0].end == date(2024, 1, 8)


@pytest.mark.parametrize(
    "payload",
    [{}, {"start": "08/01/2024"}, {"start": "2024-01-10", "end": "2024-01-08"}],
)
def test_bad_dates_are_rejected(make_client, payload):
    container = FakeContainer()
    _, client = make_client(container)

    resp = client.post("/integrations/primeponto/import", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert container.ranges == []


@pytest.mark.parametrize("error", [ValidationError("too early"), ConfigurationError("missing CNPJ")])
def test_service_errors_become_400(make_client, error):
    _, client = make_client(FakeContainer(error))

    resp = client.post("/integrations/primeponto/import", json={"start": "2024-01-08"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == str(error)


def test_token_is_checked_when_configured(make_client):
    app, client = make_client(FakeContainer())
    app.config["IMPORT_API_TOKEN"] = "s3cret"

    denied = client.post("/integrations/primeponto/import", json={"start": "2024-01-08"})
    allowed = client.post(
        "/integrations/primeponto/import",
        json={"start": "2024-01-08"},
        headers={"X-Api-Token": "s3cret"},
    )

    assert denied.status_code == 401
    assert allowed.status_code == 200
