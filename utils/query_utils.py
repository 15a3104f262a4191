# utils/query_utils.py

from datetime import date
from typing import Any, Dict

from utils.schedule import days_in_month


def daily_record_key(employee_id: str, record_date: date) -> Dict[str, Any]:
    """Natural key of an attendance document: one per employee per day."""
    return {"employee_id": employee_id, "date": record_date.isoformat()}


def monthly_summary_key(employee_id: str, month: int, year: int) -> Dict[str, Any]:
    """Natural key of a monthly summary document."""
    return {"employee_id": employee_id, "month": month, "year": year}


def build_month_range_filter(employee_id: str, year: int, month: int) -> Dict[str, Any]:
    """
    Builds a MongoDB filter for one employee's attendance in a calendar month.
    Dates are stored as ISO strings, so a string range selects the month.
    """
    start_date = date(year, month, 1)
    end_date = date(year, month, days_in_month(year, month))
    return {
        "employee_id": employee_id,
        "date": {
            "$gte": start_date.isoformat(),
            "$lte": end_date.isoformat(),
        },
    }
