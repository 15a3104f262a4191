# database.py
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING

from config import MONGODB_URI, MONGODB_DB_NAME

client = AsyncIOMotorClient(MONGODB_URI)
db = client[MONGODB_DB_NAME]

def get_employee_collection():
    return db["employees"]

def get_attendance_collection():
    return db["attendance"]

def get_monthly_summary_collection():
    return db["monthly_summaries"]

async def ensure_indexes():
    """Unique indexes backing the natural keys used for upserts."""
    await get_employee_collection().create_index([("name", ASCENDING)], unique=True)
    await get_attendance_collection().create_index(
        [("employee_id", ASCENDING), ("date", ASCENDING)], unique=True
    )
    await get_monthly_summary_collection().create_index(
        [("employee_id", ASCENDING), ("month", ASCENDING), ("year", ASCENDING)], unique=True
    )
