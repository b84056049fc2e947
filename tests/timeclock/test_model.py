from datetime import date

import pytest

from src.timeclock_integration.timeclock_integration.core.exceptions import ValidationError
from src.timeclock_integration.timeclock_integration.timeclock.model import DateRange


def test_range_is_inclusive_and_ordered():
    r = DateRange(date(2024, 2, 28), date(2024, 3, 1))

    assert list(r) == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]
    assert len(r) == 3


def test_single_day_range():
    r = DateRange.parse("2024-01-08")

    assert list(r) == [date(2024, 1, 8)]


def test_start_after_end_is_rejected():
    with pytest.raises(ValidationError):
        DateRange(date(2024, 1, 10), date(2024, 1, 8))


def test_parse_rejects_bad_format():
    with pytest.raises(ValidationError):
        DateRange.parse("08/01/2024", "2024-01-10")
