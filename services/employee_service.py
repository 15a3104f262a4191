# services/employee_service.py

import logging
from datetime import datetime
from typing import List, Optional

from bson.errors import InvalidId
from bson.objectid import ObjectId
from pymongo.errors import DuplicateKeyError

from database import get_employee_collection
from models.employee import Employee

logger = logging.getLogger(__name__)


def _to_employee(doc) -> Employee:
    return Employee(id=str(doc["_id"]), name=doc["name"])


async def find_or_create_employee(name: str) -> Optional[Employee]:
    """
    Look up an employee by exact name, creating it on first sight.

    A concurrent upload can insert the same name between the lookup and the
    insert; the unique index then rejects ours and we re-query once. Returns
    None if the employee still cannot be found.
    """
    collection = get_employee_collection()

    existing = await collection.find_one({"name": name})
    if existing:
        return _to_employee(existing)

    try:
        result = await collection.insert_one({"name": name, "created_at": datetime.now()})
        return Employee(id=str(result.inserted_id), name=name)
    except DuplicateKeyError:
        existing = await collection.find_one({"name": name})
        if existing:
            return _to_employee(existing)

    logger.warning("Could not resolve employee %r after duplicate-key conflict", name)
    return None


async def list_employees() -> List[Employee]:
    cursor = get_employee_collection().find({}).sort("name", 1)
    employees = await cursor.to_list(length=None)
    return [_to_employee(doc) for doc in employees]


async def get_employee(employee_id: str) -> Optional[Employee]:
    try:
        object_id = ObjectId(employee_id)
    except (InvalidId, TypeError):
        return None

    doc = await get_employee_collection().find_one({"_id": object_id})
    return _to_employee(doc) if doc else None
