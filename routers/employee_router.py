# routers/employee_router.py
from fastapi import APIRouter, Query
from fastapi.responses import StreamingResponse

from models.employee import EmployeeList
from services.employee_service import list_employees
from utils.excel_utils import generate_sample_csv, generate_sample_excel

router = APIRouter()

@router.get("/employees", response_model=EmployeeList)
async def api_get_employees():
    employees = await list_employees()
    return {"employees": employees}

@router.get("/download_sample_template")
async def download_sample_template(kind: str = Query("xlsx", pattern="^(xlsx|csv)$")):
    """
    Download a sample attendance file with example data to show the correct format.
    """
    if kind == "csv":
        return StreamingResponse(
            generate_sample_csv(),
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=sample-attendance.csv"}
        )

    return StreamingResponse(
        generate_sample_excel(),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": "attachment; filename=sample-attendance.xlsx"}
    )
