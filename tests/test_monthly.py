from datetime import date

from models.attendance_model import AttendanceStatus, DailyRecord
from utils.derivation import derive_record
from utils.monthly import (
    aggregate,
    expected_hours_for_month,
    group_by_month,
    leave_standing,
    leaves_used,
    productivity,
)
from utils.schedule import day_policy, month_days


def test_empty_leap_february():
    summary = aggregate("emp-1", 2024, 2, [])

    assert summary.expected_hours == 194.5
    assert summary.leaves_used == 25
    assert summary.actual_worked_hours == 0
    assert summary.productivity == 0
    assert summary.daily_records == []


def test_empty_month_leaves_equal_working_days():
    for month in range(1, 13):
        working_days = sum(1 for d in month_days(2023, month) if day_policy(d).is_working_day)
        assert leaves_used(2023, month, []) == working_days


def test_expected_hours_for_january_2024():
    # 23 weekdays, 4 Saturdays
    assert expected_hours_for_month(2024, 1) == 211.5


def test_aggregate_january():
    records = [
        derive_record("2024-01-16", "10:00", "18:30"),   # Tuesday
        derive_record("2024-01-17", "10:00", "14:00"),   # Wednesday
        derive_record("2024-01-06", "10:00", "14:00"),   # Saturday
        derive_record("2024-01-08", None, None),          # Monday, leave
        derive_record("2024-01-07", None, None),          # Sunday
    ]

    summary = aggregate("emp-1", 2024, 1, records, employee_name="Alice")

    assert summary.employee_name == "Alice"
    assert summary.actual_worked_hours == 16.5
    assert summary.leaves_used == 24
    assert summary.productivity == 7.8
    assert [r.day_name for r in summary.daily_records] == [
        "Tuesday", "Wednesday", "Saturday", "Monday", "Sunday",
    ]
    assert summary.daily_records[3].worked_hours is None
    assert summary.daily_records[4].status == AttendanceStatus.SUNDAY


def test_aggregate_is_idempotent():
    records = [
        derive_record("2024-03-04", "9:45", "18:40"),
        derive_record("2024-03-05", "10:05", "18:20"),
    ]

    assert aggregate("emp-1", 2024, 3, records) == aggregate("emp-1", 2024, 3, records)


def test_first_record_for_a_day_decides_leave():
    present = DailyRecord(date=date(2024, 1, 16), worked_hours=8.5, status=AttendanceStatus.PRESENT)
    leave = DailyRecord(date=date(2024, 1, 16), status=AttendanceStatus.LEAVE)

    assert leaves_used(2024, 1, [present, leave]) == 26
    assert leaves_used(2024, 1, [leave, present]) == 27


def test_productivity():
    assert productivity(0, 0) == 0
    assert productivity(194.5, 194.5) == 100
    assert productivity(100, 300) == 33.33
    # 1 / 32 * 100 = 3.125 exactly
    assert productivity(1, 32) == 3.13


def test_group_by_month():
    records = [
        derive_record("2024-02-01", "10:00", "18:30"),
        derive_record("2024-01-31", "10:00", "18:30"),
        derive_record("2024-02-02", "10:00", "18:30"),
    ]

    groups = group_by_month(records)

    assert list(groups) == [(2024, 2), (2024, 1)]
    assert len(groups[(2024, 2)]) == 2


def test_leave_standing():
    assert leave_standing(1, 2) == "within"
    assert leave_standing(2, 2) == "at_limit"
    assert leave_standing(3, 2) == "exceeded"
