# config.py
import os
from dotenv import load_dotenv

load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB_NAME = os.getenv("MONGODB_DB_NAME", "attendance_db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Uploads larger than this are rejected before parsing
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

# Leaves per month shown as "used / allowance" on the dashboard
MONTHLY_LEAVE_ALLOWANCE = int(os.getenv("MONTHLY_LEAVE_ALLOWANCE", "2"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
