# utils/cell_values.py
"""
Coercion of raw spreadsheet / CSV cell values into dates and times.

Cells arrive as whatever the reader produced: text, numbers (spreadsheet
serials), native date/time objects, durations, booleans, None. ``normalize`` is the
single place where that open set is closed down to the types the rest of the
pipeline understands.
"""
import math
import numbers
import re
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from dateutil import parser as date_parser

SPREADSHEET_EPOCH = datetime(1899, 12, 30)

_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})(?:\s*(AM|PM))?", re.IGNORECASE)

CellValue = Union[str, float, datetime, date, time, timedelta]


def normalize(raw) -> Optional[CellValue]:
    """
    Accept text, numbers and native date/time values; reject everything else.

    Booleans are rejected (and must be checked before numbers, since ``bool``
    is an ``int``), as are None, NaN/infinity and any other object.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (datetime, date, time, timedelta)):
        return raw
    if isinstance(raw, numbers.Real):
        value = float(raw)
        if math.isnan(value) or math.isinf(value):
            return None
        return value
    return None


def is_rejected(raw) -> bool:
    """True for a cell holding a value of an unsupported type, such as a boolean."""
    if raw is None:
        return False
    if isinstance(raw, float) and math.isnan(raw):
        # empty cell as read by pandas
        return False
    return normalize(raw) is None


def is_blank(value: Optional[CellValue]) -> bool:
    """True for None, empty/whitespace text, the numeric zero and a zero duration."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, float):
        return value == 0
    if isinstance(value, timedelta):
        return not value
    return False


def _from_serial(value: float) -> Optional[datetime]:
    try:
        return SPREADSHEET_EPOCH + timedelta(days=value)
    except (OverflowError, ValueError):
        return None


def _parse_free_form(text: str) -> Optional[datetime]:
    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError):
        return None


def parse_date(value: Optional[CellValue]) -> Optional[date]:
    """
    Resolve a normalized cell value to a calendar date.

    Numbers are day serials counted from 1899-12-30; the fractional part
    (time of day) is dropped. Text goes through dateutil's free-form parser.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, timedelta):
        return (SPREADSHEET_EPOCH + value).date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        parsed = _parse_free_form(text)
        return parsed.date() if parsed else None
    if isinstance(value, float):
        parsed = _from_serial(value)
        return parsed.date() if parsed else None
    return None


def _parse_clock_text(text: str) -> Optional[time]:
    match = _TIME_PATTERN.search(text)
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    meridiem = (match.group(3) or "").upper()

    if meridiem == "PM" and hours != 12:
        hours += 12
    elif meridiem == "AM" and hours == 12:
        hours = 0

    if hours > 23 or minutes > 59:
        return None
    return time(hours, minutes)


def parse_time(value: Optional[CellValue]) -> Optional[time]:
    """
    Resolve a normalized cell value to a time of day.

    Numbers are fractions of a day (0.5 = noon). Durations (openpyxl reads
    ``[h]:mm`` cells as ``timedelta``) wrap at 24 hours. Text is matched against
    ``H:MM`` with an optional AM/PM suffix first, then the free-form parser.
    """
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value
    if isinstance(value, date):
        return time(0, 0)
    if isinstance(value, timedelta):
        return (datetime.min + value % timedelta(days=1)).time()
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        parsed = _parse_clock_text(text)
        if parsed is not None:
            return parsed
        fallback = _parse_free_form(text)
        return fallback.time() if fallback else None
    if isinstance(value, float):
        parsed = _from_serial(value)
        return parsed.time() if parsed else None
    return None


def combine(day: date, clock: time) -> datetime:
    return datetime.combine(day, clock.replace(tzinfo=None))
