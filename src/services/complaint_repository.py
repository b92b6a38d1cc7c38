from typing import Any, Dict, List, Optional
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError
from src.core.exceptions import ConflictError, StorageError
from src.core.logging import logger


class ComplaintRepository:
    """
    MongoDB-backed complaint store.

    Records are addressed either by the storage ``_id`` or by the
    human-facing ``complaintId``.
    """

    COLLECTION = "complaints"

    def __init__(self, db):
        self.collection = db[self.COLLECTION]

    @staticmethod
    def _serialize(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if doc is not None and "_id" in doc:
            doc["_id"] = str(doc["_id"])
        return doc

    @staticmethod
    def _id_query(identifier: str) -> Dict[str, Any]:
        try:
            return {"_id": ObjectId(identifier)}
        except (InvalidId, TypeError):
            return {"complaintId": identifier}

    async def create(self, complaint: Dict[str, Any]) -> Dict[str, Any]:
        doc = dict(complaint)
        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError as exc:
            raise ConflictError(
                f"Complaint id {complaint.get('complaintId')} already exists"
            ) from exc
        except PyMongoError as exc:
            logger.error("Failed to insert complaint: %s", exc)
            raise StorageError("Failed to submit complaint") from exc
        doc["_id"] = result.inserted_id
        return self._serialize(doc)

    async def list(self, query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        try:
            cursor = self.collection.find(query or {}).sort("date", DESCENDING)
            docs = await cursor.to_list(length=None)
        except PyMongoError as exc:
            logger.error("Failed to fetch complaints: %s", exc)
            raise StorageError("Failed to fetch complaints") from exc
        return [self._serialize(doc) for doc in docs]

    async def get(self, identifier: str) -> Optional[Dict[str, Any]]:
        try:
            doc = await self.collection.find_one(self._id_query(identifier))
        except PyMongoError as exc:
            logger.error("Failed to fetch complaint %s: %s", identifier, exc)
            raise StorageError("Failed to fetch complaint") from exc
        return self._serialize(doc)

    async def find_by_attachment(self, attachment_path: str) -> Optional[Dict[str, Any]]:
        try:
            doc = await self.collection.find_one({"attachmentPath": attachment_path})
        except PyMongoError as exc:
            logger.error("Failed to look up attachment %s: %s", attachment_path, exc)
            raise StorageError("Failed to retrieve file") from exc
        return self._serialize(doc)

    async def update(self, identifier: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply ``changes`` and return the updated record, or None when nothing
        matched.
        """
        try:
            doc = await self.collection.find_one_and_update(
                self._id_query(identifier),
                {"$set": changes},
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as exc:
            logger.error("Failed to update complaint %s: %s", identifier, exc)
            raise StorageError("Failed to update complaint status") from exc
        return self._serialize(doc)
