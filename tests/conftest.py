import copy
import os
from types import SimpleNamespace

os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
import httpx
from bson import ObjectId
from httpx import ASGITransport
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError
from src.api.dependencies import get_attachment_store
from src.db.indexes import create_indexes
from src.db.mongo import get_db
from src.main import app
from src.services.attachment_store import AttachmentStore


class InMemoryCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction=1):
        self._docs.sort(key=lambda doc: doc.get(key), reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        return self._docs if length is None else self._docs[:length]


class InMemoryCollection:
    """Just enough of motor's collection API for the repositories."""

    def __init__(self, name):
        self.name = name
        self.docs = []
        self.unique_fields = []

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    async def create_index(self, keys, unique=False, **kwargs):
        if isinstance(keys, str):
            keys = [(keys, 1)]
        if unique:
            self.unique_fields.append(tuple(field for field, _ in keys))
        return "_".join(field for field, _ in keys)

    async def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        for fields in self.unique_fields:
            key = tuple(doc.get(field) for field in fields)
            if any(tuple(other.get(field) for field in fields) == key for other in self.docs):
                raise DuplicateKeyError(f"E11000 duplicate key on {fields}")
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, query=None):
        return InMemoryCursor([copy.deepcopy(d) for d in self.docs if self._matches(d, query or {})])

    async def find_one(self, query):
        for doc in self.docs:
            if self._matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def find_one_and_update(self, query, update, return_document=ReturnDocument.BEFORE):
        for doc in self.docs:
            if self._matches(doc, query):
                before = copy.deepcopy(doc)
                doc.update(update.get("$set", {}))
                return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before
        return None


class InMemoryDatabase:
    def __init__(self, name="complaintDB_test"):
        self.name = name
        self._collections = {}

    def __getitem__(self, name):
        if name not in self._collections:
            self._collections[name] = InMemoryCollection(name)
        return self._collections[name]

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    async def command(self, name):
        return {"ok": 1.0}


@pytest_asyncio.fixture
async def db():
    database = InMemoryDatabase()
    await create_indexes(database)
    return database


@pytest.fixture
def attachment_store(tmp_path):
    return AttachmentStore(tmp_path / "uploads")


@pytest_asyncio.fixture
async def client(db, attachment_store):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_attachment_store] = lambda: attachment_store
    transport = ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
