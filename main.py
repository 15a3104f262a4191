# main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LOG_LEVEL
from database import ensure_indexes
from routers import attendance_router, employee_router, test_router
from utils.errors import BatchError, PersistenceFailure

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await ensure_indexes()
    logger.info("Database indexes ready")
    yield


app = FastAPI(title="Employee Attendance & Productivity", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# A rejected upload: nothing was saved
@app.exception_handler(BatchError)
async def batch_error_handler(request: Request, exc: BatchError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.exception_handler(PersistenceFailure)
async def persistence_failure_handler(request: Request, exc: PersistenceFailure):
    return JSONResponse(status_code=500, content={"detail": str(exc)})

# Include your routers
app.include_router(attendance_router.router)
app.include_router(employee_router.router)
app.include_router(test_router.router)

@app.get("/")
def read_root():
    return {"message": "Welcome to the Employee Attendance & Productivity API"}
