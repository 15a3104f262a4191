# utils/schedule.py
import calendar
from datetime import date
from typing import List, NamedTuple

SUNDAY = 0
SATURDAY = 6

SATURDAY_HOURS = 4.0    # 10:00 - 14:00
WEEKDAY_HOURS = 8.5     # 10:00 - 18:30

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


class DayPolicy(NamedTuple):
    day_of_week: int  # 0 = Sunday ... 6 = Saturday
    is_working_day: bool
    expected_hours: float


def day_of_week(day: date) -> int:
    # date.weekday() counts from Monday = 0
    return (day.weekday() + 1) % 7


def day_policy(day: date) -> DayPolicy:
    """Expected-hours policy for a calendar date under the fixed schedule."""
    dow = day_of_week(day)

    if dow == SUNDAY:
        return DayPolicy(dow, False, 0.0)
    if dow == SATURDAY:
        return DayPolicy(dow, True, SATURDAY_HOURS)
    return DayPolicy(dow, True, WEEKDAY_HOURS)


def day_name(day: date) -> str:
    return DAY_NAMES[day_policy(day).day_of_week]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_days(year: int, month: int) -> List[date]:
    """Every calendar day of the given month, in order."""
    return [date(year, month, d) for d in range(1, days_in_month(year, month) + 1)]
