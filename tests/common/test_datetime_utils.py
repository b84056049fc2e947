from datetime import date

import pytest

from src.timeclock_integration.timeclock_integration.common.datetime_utils import (
    leading_date,
    parse_config_date,
    seconds_to_time,
)


def test_parse_config_date_accepts_both_formats():
    assert parse_config_date("09/01/2024") == date(2024, 1, 9)
    assert parse_config_date(" 2024-01-09 ") == date(2024, 1, 9)


def test_parse_config_date_rejects_invalid():
    with pytest.raises(ValueError):
        parse_config_date("2024/01/09")


def test_leading_date_ignores_time_suffix():
    assert leading_date("2015-07-01T00:00:00-03:00") == date(2015, 7, 1)


def test_seconds_to_time():
    assert seconds_to_time(480 * 60) == "08:00:00"
    assert seconds_to_time(0) == "00:00:00"
    assert seconds_to_time(100 * 3600 + 61) == "100:01:01"
