# utils/monthly.py
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from models.attendance_model import AttendanceStatus, DailyRecord, DailyRecordView, MonthlySummary
from utils.derivation import round2
from utils.schedule import day_name, day_policy, month_days


def expected_hours_for_month(year: int, month: int) -> float:
    """Scheduled hours over every calendar day of the month."""
    total = sum(day_policy(day).expected_hours for day in month_days(year, month))
    return round2(total)


def leaves_used(year: int, month: int, records: List[DailyRecord]) -> int:
    """
    Count working days that are leave.

    A working day with no record counts the same as one explicitly marked
    leave. Sundays never count.
    """
    by_day: Dict[date, DailyRecord] = {}
    for record in records:
        # first record for a day wins
        by_day.setdefault(record.date, record)

    used = 0
    for day in month_days(year, month):
        if not day_policy(day).is_working_day:
            continue
        record = by_day.get(day)
        if record is None or record.status == AttendanceStatus.LEAVE:
            used += 1
    return used


def productivity(actual_worked_hours: float, expected_hours: float) -> float:
    if expected_hours == 0:
        return 0.0
    return round2(actual_worked_hours / expected_hours * 100)


def aggregate(
    employee_id: str,
    year: int,
    month: int,
    records: List[DailyRecord],
    employee_name: Optional[str] = None,
) -> MonthlySummary:
    """
    Build the monthly summary for one employee.

    All ``records`` are expected to fall in (year, month). The expected hours
    come from the calendar, so months with missing rows still get the full
    denominator.
    """
    expected = expected_hours_for_month(year, month)
    actual = round2(sum(r.worked_hours for r in records if r.worked_hours is not None))

    daily_records = [
        DailyRecordView(
            date=r.date,
            day_name=day_name(r.date),
            worked_hours=r.worked_hours,
            status=r.status,
        )
        for r in records
    ]

    return MonthlySummary(
        employee_id=employee_id,
        employee_name=employee_name,
        month=month,
        year=year,
        expected_hours=expected,
        actual_worked_hours=actual,
        leaves_used=leaves_used(year, month, records),
        productivity=productivity(actual, expected),
        daily_records=daily_records,
    )


def group_by_month(records: Iterable[DailyRecord]) -> Dict[Tuple[int, int], List[DailyRecord]]:
    """Bucket records by (year, month) of their date, in first-seen order."""
    months: Dict[Tuple[int, int], List[DailyRecord]] = {}
    for record in records:
        months.setdefault((record.date.year, record.date.month), []).append(record)
    return months


def leave_standing(used: int, allowance: int) -> str:
    if used > allowance:
        return "exceeded"
    if used == allowance:
        return "at_limit"
    return "within"
