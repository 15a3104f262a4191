# utils/excel_utils.py

import random
import pandas as pd
from io import BytesIO
from datetime import date, time
from openpyxl.styles import Font, Alignment, PatternFill
from openpyxl.utils import get_column_letter
from typing import List, Optional

from utils.schedule import SATURDAY, SUNDAY, day_policy, month_days

TEMPLATE_COLUMNS = ["Employee Name/ID", "Date", "In-Time", "Out-Time"]

SAMPLE_EMPLOYEES = ["John Doe", "Jane Smith", "Bob Johnson"]


def generate_sample_rows(
    employees: Optional[List[str]] = None,
    year: int = 2024,
    month: int = 1,
    seed: Optional[int] = None,
) -> List[list]:
    """
    Build realistic attendance rows for one month.

    Sundays carry no times, Saturdays are 10:00-14:00 or a leave, weekdays
    are around 10:00-18:30 with an occasional leave.

    Returns:
        List of [name, date, in_time, out_time] rows (times may be None)
    """
    rng = random.Random(seed)
    employees = employees or SAMPLE_EMPLOYEES
    rows = []

    for employee in employees:
        for day in month_days(year, month):
            dow = day_policy(day).day_of_week

            if dow == SUNDAY:
                rows.append([employee, day, None, None])
            elif dow == SATURDAY:
                if rng.random() < 0.5:
                    rows.append([employee, day, time(10, 0), time(14, 0)])
                else:
                    rows.append([employee, day, None, None])
            elif rng.random() < 0.05:
                rows.append([employee, day, None, None])
            else:
                in_offset = rng.randint(-15, 15)
                out_offset = rng.randint(-15, 15)
                in_minutes = 10 * 60 + in_offset
                out_minutes = 18 * 60 + 30 + out_offset
                rows.append([
                    employee,
                    day,
                    time(in_minutes // 60, in_minutes % 60),
                    time(out_minutes // 60, out_minutes % 60),
                ])

    return rows


def _format_csv_cell(value):
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return value.strftime("%H:%M")
    return value


def generate_sample_csv(rows: Optional[List[list]] = None) -> BytesIO:
    """Generate a sample attendance CSV with the fixed four-column header."""
    rows = rows if rows is not None else generate_sample_rows()
    df = pd.DataFrame(
        [[_format_csv_cell(v) for v in row] for row in rows],
        columns=TEMPLATE_COLUMNS,
    )

    output = BytesIO()
    output.write(df.to_csv(index=False, lineterminator="\n").encode("utf-8"))
    output.seek(0)
    return output


def generate_sample_excel(rows: Optional[List[list]] = None) -> BytesIO:
    """Generate a sample attendance workbook with a styled header row."""
    rows = rows if rows is not None else generate_sample_rows()
    df = pd.DataFrame(rows, columns=TEMPLATE_COLUMNS)

    output = BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Attendance")
        worksheet = writer.sheets["Attendance"]

        for col_idx, column in enumerate(TEMPLATE_COLUMNS, start=1):
            cell = worksheet.cell(row=1, column=col_idx)
            cell.font = Font(bold=True)
            cell.alignment = Alignment(horizontal="center")
            cell.fill = PatternFill(start_color="E0E0E0", end_color="E0E0E0", fill_type="solid")
            worksheet.column_dimensions[get_column_letter(col_idx)].width = max(len(column) + 5, 20)

        for row_idx in range(2, len(df) + 2):
            worksheet.cell(row=row_idx, column=2).number_format = "yyyy-mm-dd"
            worksheet.cell(row=row_idx, column=3).number_format = "hh:mm"
            worksheet.cell(row=row_idx, column=4).number_format = "hh:mm"

    output.seek(0)
    return output
