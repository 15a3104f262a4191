# routers/attendance_router.py
from fastapi import APIRouter, HTTPException, UploadFile, File, Query
from fastapi.concurrency import run_in_threadpool

from config import MAX_UPLOAD_BYTES, MONTHLY_LEAVE_ALLOWANCE
from services.attendance_service import (
    commit_batch,
    file_kind_for,
    get_monthly_summary,
    process_batch,
)
from services.employee_service import get_employee
from utils.monthly import leave_standing

router = APIRouter()


async def read_upload(file: UploadFile) -> bytes:
    contents = await file.read()
    if len(contents) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File is too large (limit is {MAX_UPLOAD_BYTES} bytes)"
        )
    return contents


@router.post("/upload")
async def api_upload_attendance(file: UploadFile = File(...)):
    """
    Process an Excel or CSV attendance file and save the derived records
    and monthly summaries.
    """
    file_kind = file_kind_for(file.filename)
    contents = await read_upload(file)

    attendances = await run_in_threadpool(process_batch, contents, file_kind)
    result = await commit_batch(attendances)

    message = f"Processed {result.employees} employees, {result.records} records"
    if result.skipped_employees:
        message += f" ({len(result.skipped_employees)} employees skipped)"

    return {
        "message": message,
        "employees": result.employees,
        "records": result.records,
        "months": result.months,
        "skipped_employees": result.skipped_employees,
    }


@router.get("/monthly-summary")
async def api_get_monthly_summary(
    employee_id: str,
    month: int = Query(..., ge=1, le=12),
    year: int = Query(..., ge=1900, le=9999)
):
    summary = await get_monthly_summary(employee_id, month, year)
    if not summary:
        raise HTTPException(status_code=404, detail="No attendance summary found for this month")

    if summary.employee_name is None:
        employee = await get_employee(employee_id)
        if employee:
            summary.employee_name = employee.name

    response = summary.model_dump(mode="json")
    response["leave_allowance"] = MONTHLY_LEAVE_ALLOWANCE
    response["leave_standing"] = leave_standing(summary.leaves_used, MONTHLY_LEAVE_ALLOWANCE)
    return response
