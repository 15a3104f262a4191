# utils/derivation.py
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from models.attendance_model import AttendanceStatus, DailyRecord
from utils.cell_values import combine, is_blank, is_rejected, normalize, parse_date, parse_time
from utils.schedule import day_policy

MAX_WORKED_HOURS = 12


def round2(value: float) -> float:
    """Round to 2 decimals, halves away from zero (2.625 -> 2.63)."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def compute_worked_hours(in_time: Optional[datetime], out_time: Optional[datetime]) -> Optional[float]:
    """
    Hours between in and out, rounded to 2 decimals.

    Returns None when either side is missing, or when the span is negative
    or longer than 12 hours (swapped times, multi-day spans).
    """
    if in_time is None or out_time is None:
        return None

    hours = (out_time - in_time).total_seconds() / 3600
    if hours < 0 or hours > MAX_WORKED_HOURS:
        return None
    return round2(hours)


def derive_status(day: date, worked_hours: Optional[float]) -> AttendanceStatus:
    if not day_policy(day).is_working_day:
        return AttendanceStatus.SUNDAY
    if worked_hours is None or worked_hours == 0:
        return AttendanceStatus.LEAVE
    return AttendanceStatus.PRESENT


def _timestamp_on(day: date, raw) -> Optional[datetime]:
    value = normalize(raw)
    if value is None:
        return None
    clock = parse_time(value)
    if clock is None:
        return None
    return combine(day, clock)


def derive_record(date_raw, in_raw=None, out_raw=None) -> Optional[DailyRecord]:
    """
    Build the daily record for one row, or None when the row must be skipped.

    Only the date is mandatory. Missing or unreadable in/out times leave the
    corresponding timestamp empty, which makes the day a leave. A cell of an
    unsupported type (a boolean) anywhere in the row skips the row.
    """
    if any(is_rejected(raw) for raw in (date_raw, in_raw, out_raw)):
        return None

    date_value = normalize(date_raw)
    if is_blank(date_value):
        return None

    day = parse_date(date_value)
    if day is None:
        return None

    in_time = _timestamp_on(day, in_raw)
    out_time = _timestamp_on(day, out_raw)
    worked_hours = compute_worked_hours(in_time, out_time)

    return DailyRecord(
        date=day,
        in_time=in_time,
        out_time=out_time,
        worked_hours=worked_hours,
        status=derive_status(day, worked_hours),
    )
