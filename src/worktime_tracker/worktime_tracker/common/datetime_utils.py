from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.constants import DATE_FORMAT, TIME_FORMAT, TIME_FORMAT_SECONDS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_clock_time(value: str) -> time:
    """Parse HH:MM or HH:MM:SS string into time."""
    value = value.strip()
    fmt = TIME_FORMAT_SECONDS if value.count(":") == 2 else TIME_FORMAT
    return datetime.strptime(value, fmt).time()


def format_date(value: Optional[date], fmt: str = DATE_FORMAT) -> Optional[str]:
    return value.strftime(fmt) if value else None


def format_time(value: Optional[time], fmt: Optional[str] = None) -> Optional[str]:
    """Format a time; without ``fmt``, seconds are kept only when non-zero."""
    if value is None:
        return None
    if fmt is None:
        fmt = TIME_FORMAT_SECONDS if value.second else TIME_FORMAT
    return value.strftime(fmt)
