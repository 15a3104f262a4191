# models/attendance_model.py
from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date, datetime


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    LEAVE = "leave"
    SUNDAY = "sunday"


class FileKind(str, Enum):
    SPREADSHEET = "spreadsheet"
    DELIMITED_TEXT = "delimited_text"


class DailyRecord(BaseModel):
    date: date
    in_time: Optional[datetime] = None
    out_time: Optional[datetime] = None
    worked_hours: Optional[float] = None
    status: AttendanceStatus


class EmployeeAttendance(BaseModel):
    employee_name: str
    records: List[DailyRecord] = Field(default_factory=list)
    employee_id: Optional[str] = None  # set once the employee is persisted


class DailyRecordView(BaseModel):
    date: date
    day_name: str
    worked_hours: Optional[float] = None
    status: AttendanceStatus


class MonthlySummary(BaseModel):
    employee_id: str
    employee_name: Optional[str] = None
    month: int = Field(ge=1, le=12)
    year: int
    expected_hours: float
    actual_worked_hours: float
    leaves_used: int
    productivity: float  # percent
    daily_records: List[DailyRecordView] = Field(default_factory=list)


class CommitResult(BaseModel):
    employees: int = 0
    records: int = 0
    months: int = 0
    skipped_employees: List[str] = Field(default_factory=list)
