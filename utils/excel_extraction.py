# utils/excel_extraction.py
import logging
from io import BytesIO
from typing import Dict, Iterable, List, Optional, Sequence

from openpyxl import load_workbook

from models.attendance_model import EmployeeAttendance
from utils.cell_values import normalize
from utils.derivation import derive_record
from utils.errors import EmptySheetError, UnsupportedFormatError

logger = logging.getLogger(__name__)

# Fixed column order: name, date, in-time, out-time
COLUMN_COUNT = 4


def parse_csv(csv_text: str) -> List[List[str]]:
    """
    Split delimited text into rows of trimmed fields.

    Blank lines are skipped. Commas inside double-quoted spans do not split;
    quotes themselves are dropped. Escaped quotes are not supported.
    """
    rows = []
    for line in csv_text.splitlines():
        if not line.strip():
            continue

        row = []
        current_field = []
        inside_quotes = False
        for char in line:
            if char == '"':
                inside_quotes = not inside_quotes
            elif char == "," and not inside_quotes:
                row.append("".join(current_field).strip())
                current_field = []
            else:
                current_field.append(char)

        row.append("".join(current_field).strip())
        rows.append(row)

    return rows


def employee_name_from(raw) -> Optional[str]:
    value = normalize(raw)
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        # numeric employee IDs read from a sheet come back as floats
        value = int(value)
    name = str(value).strip()
    return name or None


def process_row(row: Sequence) -> Optional[tuple]:
    """Return (employee_name, DailyRecord) for a usable row, else None."""
    cells = list(row[:COLUMN_COUNT]) + [None] * (COLUMN_COUNT - len(row[:COLUMN_COUNT]))
    name_raw, date_raw, in_raw, out_raw = cells

    name = employee_name_from(name_raw)
    if name is None:
        return None

    record = derive_record(date_raw, in_raw, out_raw)
    if record is None:
        return None
    return name, record


def accumulate_rows(rows: Iterable[Sequence]) -> Dict[str, EmployeeAttendance]:
    """
    Derive every data row and group the records by employee name.

    ``rows`` must already exclude the header. The returned dict keeps
    first-seen employee order and row order within each employee.
    """
    employees: Dict[str, EmployeeAttendance] = {}
    accepted, skipped = 0, 0

    for row in rows:
        result = process_row(row)
        if result is None:
            skipped += 1
            continue

        name, record = result
        employee = employees.get(name)
        if employee is None:
            employee = EmployeeAttendance(employee_name=name)
            employees[name] = employee
        employee.records.append(record)
        accepted += 1

    logger.debug("Derived %d rows, skipped %d", accepted, skipped)
    return employees


def extract_attendance_from_csv(contents: bytes) -> Dict[str, EmployeeAttendance]:
    # undecodable bytes only spoil the field they sit in
    text = contents.decode("utf-8-sig", errors="replace")

    rows = parse_csv(text)
    # first row is always the header
    return accumulate_rows(rows[1:])


def extract_attendance_from_excel(contents: bytes) -> Dict[str, EmployeeAttendance]:
    try:
        workbook = load_workbook(BytesIO(contents), read_only=True, data_only=True)
    except Exception as e:
        raise UnsupportedFormatError(f"Could not read Excel file: {str(e)}")

    try:
        if not workbook.worksheets:
            raise EmptySheetError()

        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(min_row=2, max_col=COLUMN_COUNT, values_only=True)
        return accumulate_rows(rows)
    finally:
        workbook.close()
