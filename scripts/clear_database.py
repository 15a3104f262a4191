# scripts/clear_database.py
"""
Delete ALL attendance data: daily records, monthly summaries and employees.

Run with: python -m scripts.clear_database
"""
import asyncio
import sys

from pymongo.errors import PyMongoError

from database import (
    client,
    get_attendance_collection,
    get_employee_collection,
    get_monthly_summary_collection,
)


async def clear_database():
    print("WARNING: This will delete ALL data from the database!")

    # Children first, employees last
    for label, collection in (
        ("attendance records", get_attendance_collection()),
        ("monthly summaries", get_monthly_summary_collection()),
        ("employees", get_employee_collection()),
    ):
        result = await collection.delete_many({})
        print(f"Deleted {result.deleted_count} {label}")

    print("Database cleared. Upload fresh data to start over.")


def main():
    try:
        asyncio.run(clear_database())
    except PyMongoError as e:
        print(f"Error clearing database: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        client.close()


if __name__ == "__main__":
    main()
