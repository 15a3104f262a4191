# services/attendance_service.py
import logging
from datetime import date, datetime
from typing import List, Optional

from pymongo.errors import PyMongoError

from database import get_attendance_collection, get_monthly_summary_collection
from models.attendance_model import (
    CommitResult,
    DailyRecord,
    EmployeeAttendance,
    FileKind,
    MonthlySummary,
)
from services.employee_service import find_or_create_employee
from utils.errors import NoValidRowsError, PersistenceFailure, UnsupportedFormatError
from utils.excel_extraction import extract_attendance_from_csv, extract_attendance_from_excel
from utils.monthly import aggregate, group_by_month
from utils.query_utils import build_month_range_filter, daily_record_key, monthly_summary_key

logger = logging.getLogger(__name__)

SPREADSHEET_EXTENSIONS = (".xlsx", ".xlsm")
DELIMITED_TEXT_EXTENSIONS = (".csv",)


def file_kind_for(filename: Optional[str]) -> FileKind:
    """Pick the row adapter from the uploaded file's extension."""
    name = (filename or "").lower()
    if name.endswith(DELIMITED_TEXT_EXTENSIONS):
        return FileKind.DELIMITED_TEXT
    if name.endswith(SPREADSHEET_EXTENSIONS):
        return FileKind.SPREADSHEET
    raise UnsupportedFormatError(
        "Please upload an Excel file (.xlsx) or CSV file (.csv)"
    )


def process_batch(contents: bytes, file_kind: FileKind) -> List[EmployeeAttendance]:
    """
    Derive daily attendance records from an uploaded file.

    Args:
        contents: Raw bytes of the upload
        file_kind: Which row adapter to use

    Returns:
        One EmployeeAttendance per distinct employee name, in first-seen order

    Raises:
        EmptySheetError, UnsupportedFormatError, NoValidRowsError
    """
    if file_kind == FileKind.DELIMITED_TEXT:
        employees = extract_attendance_from_csv(contents)
    elif file_kind == FileKind.SPREADSHEET:
        employees = extract_attendance_from_excel(contents)
    else:
        raise UnsupportedFormatError(f"Unsupported file kind: {file_kind}")

    if not employees:
        raise NoValidRowsError()

    attendances = list(employees.values())
    logger.info(
        "Derived %d records for %d employees",
        sum(len(a.records) for a in attendances),
        len(attendances),
    )
    return attendances


def _record_to_doc(employee_id: str, record: DailyRecord) -> dict:
    doc = daily_record_key(employee_id, record.date)
    doc.update({
        "in_time": record.in_time,
        "out_time": record.out_time,
        "worked_hours": record.worked_hours,
        "status": record.status.value,
        "updated_at": datetime.now(),
    })
    return doc


def _doc_to_record(doc: dict) -> DailyRecord:
    return DailyRecord(
        date=date.fromisoformat(doc["date"]),
        in_time=doc.get("in_time"),
        out_time=doc.get("out_time"),
        worked_hours=doc.get("worked_hours"),
        status=doc["status"],
    )


async def upsert_daily_record(employee_id: str, record: DailyRecord):
    await get_attendance_collection().update_one(
        daily_record_key(employee_id, record.date),
        {"$set": _record_to_doc(employee_id, record)},
        upsert=True,
    )


async def get_daily_records(employee_id: str, year: int, month: int) -> List[DailyRecord]:
    """All stored records of an employee for one month, ordered by date."""
    cursor = get_attendance_collection().find(
        build_month_range_filter(employee_id, year, month)
    ).sort("date", 1)
    docs = await cursor.to_list(length=None)
    return [_doc_to_record(doc) for doc in docs]


async def upsert_monthly_summary(summary: MonthlySummary):
    doc = summary.model_dump(mode="json")
    doc["updated_at"] = datetime.now()
    await get_monthly_summary_collection().update_one(
        monthly_summary_key(summary.employee_id, summary.month, summary.year),
        {"$set": doc},
        upsert=True,
    )


async def get_monthly_summary(employee_id: str, month: int, year: int) -> Optional[MonthlySummary]:
    doc = await get_monthly_summary_collection().find_one(
        monthly_summary_key(employee_id, month, year)
    )
    if not doc:
        return None
    doc.pop("_id", None)
    return MonthlySummary.model_validate(doc)


async def commit_batch(attendances: List[EmployeeAttendance]) -> CommitResult:
    """
    Persist a derived batch.

    For every employee: resolve the employee document, upsert each daily
    record, then recompute each touched month from everything stored for it
    and upsert the summary. Employees that cannot be resolved are skipped.
    """
    result = CommitResult()

    try:
        for attendance in attendances:
            employee = await find_or_create_employee(attendance.employee_name)
            if employee is None:
                logger.warning(
                    "Skipping %d records for employee %r",
                    len(attendance.records),
                    attendance.employee_name,
                )
                result.skipped_employees.append(attendance.employee_name)
                continue

            attendance.employee_id = employee.id
            for record in attendance.records:
                await upsert_daily_record(employee.id, record)
            # repeated dates collapse onto one stored record
            result.records += len({record.date for record in attendance.records})

            for year, month in group_by_month(attendance.records):
                stored = await get_daily_records(employee.id, year, month)
                summary = aggregate(employee.id, year, month, stored, employee_name=employee.name)
                await upsert_monthly_summary(summary)
                result.months += 1

            result.employees += 1
    except PyMongoError as e:
        logger.exception("Failed to commit attendance batch")
        raise PersistenceFailure(str(e))

    logger.info(
        "Committed %d employees, %d records, %d monthly summaries",
        result.employees,
        result.records,
        result.months,
    )
    return result
