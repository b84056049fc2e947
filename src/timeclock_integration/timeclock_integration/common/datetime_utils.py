from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_config_date(value: str) -> date:
    """Parse a date stored in the configs table.

    Accepts dd/mm/YYYY (how the setting is entered) and YYYY-MM-DD.
    Raises ValueError for anything else.
    """
    value = value.strip()
    for fmt in ("%d/%m/%Y", "%Y-%m-%d"):
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Invalid date: {value!r}")


def leading_date(value: str) -> date:
    """Date part of an xs:dateTime such as '2015-07-01T00:00:00-03:00'."""
    return parse_iso_date(value.strip()[:10])


def seconds_to_time(total_seconds: float) -> str:
    """Format seconds as HH:MM:SS. Hours are not wrapped at 24."""
    total = int(round(total_seconds))
    hours = total // 3600
    minutes = (total % 3600) // 60
    seconds = total % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
