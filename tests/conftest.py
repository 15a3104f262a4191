from __future__ import annotations

from types import SimpleNamespace
from typing import Optional

import pytest
from bson.objectid import ObjectId
from pymongo.errors import DuplicateKeyError

from services import attendance_service, employee_service


def _matches(doc: dict, query: dict) -> bool:
    for key, cond in query.items():
        value = doc.get(key)
        if isinstance(cond, dict):
            if "$gte" in cond and (value is None or value < cond["$gte"]):
                return False
            if "$lte" in cond and (value is None or value > cond["$lte"]):
                return False
        elif value != cond:
            return False
    return True


class FakeCursor:
    def __init__(self, docs: list[dict]):
        self._docs = docs

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._docs = sorted(self._docs, key=lambda d: d.get(key), reverse=direction < 0)
        return self

    async def to_list(self, length: Optional[int] = None) -> list[dict]:
        docs = [dict(d) for d in self._docs]
        return docs if length is None else docs[:length]


class FakeCollection:
    """In-memory stand-in for the few Motor collection calls the services use."""

    def __init__(self, unique: tuple[str, ...] = ()):
        self.docs: list[dict] = []
        self.unique = unique

    def _violates_unique(self, doc: dict) -> bool:
        if not self.unique:
            return False
        key = tuple(doc.get(k) for k in self.unique)
        return any(tuple(d.get(k) for k in self.unique) == key for d in self.docs)

    async def create_index(self, keys, unique=False):
        return "index"

    async def find_one(self, query: dict) -> Optional[dict]:
        for doc in self.docs:
            if _matches(doc, query):
                return dict(doc)
        return None

    def find(self, query: dict) -> FakeCursor:
        return FakeCursor([d for d in self.docs if _matches(d, query)])

    async def insert_one(self, doc: dict):
        if self._violates_unique(doc):
            raise DuplicateKeyError("duplicate key")
        stored = dict(doc)
        stored["_id"] = ObjectId()
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def update_one(self, query: dict, update: dict, upsert: bool = False):
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(update["$set"])
                return SimpleNamespace(matched_count=1, upserted_id=None)
        if upsert:
            stored = {k: v for k, v in query.items() if not isinstance(v, dict)}
            stored.update(update["$set"])
            stored["_id"] = ObjectId()
            self.docs.append(stored)
            return SimpleNamespace(matched_count=0, upserted_id=stored["_id"])
        return SimpleNamespace(matched_count=0, upserted_id=None)

    async def delete_many(self, query: dict):
        before = len(self.docs)
        self.docs = [d for d in self.docs if not _matches(d, query)]
        return SimpleNamespace(deleted_count=before - len(self.docs))


@pytest.fixture
def fake_db(monkeypatch):
    employees = FakeCollection(unique=("name",))
    attendance = FakeCollection(unique=("employee_id", "date"))
    summaries = FakeCollection(unique=("employee_id", "month", "year"))

    monkeypatch.setattr(employee_service, "get_employee_collection", lambda: employees)
    monkeypatch.setattr(attendance_service, "get_attendance_collection", lambda: attendance)
    monkeypatch.setattr(attendance_service, "get_monthly_summary_collection", lambda: summaries)

    return SimpleNamespace(employees=employees, attendance=attendance, summaries=summaries)
