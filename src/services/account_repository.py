from typing import Any, Dict, Optional
from pymongo.errors import DuplicateKeyError, PyMongoError
from src.core.exceptions import ConflictError, StorageError
from src.core.logging import logger


class AccountRepository:
    COLLECTION = "users"

    def __init__(self, db):
        self.collection = db[self.COLLECTION]

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        try:
            return await self.collection.find_one({"email": email})
        except PyMongoError as exc:
            logger.error("Failed to look up account: %s", exc)
            raise StorageError("Failed to look up account") from exc

    async def create(self, account: Dict[str, Any]) -> Dict[str, Any]:
        doc = dict(account)
        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError as exc:
            raise ConflictError("User with this email already exists") from exc
        except PyMongoError as exc:
            logger.error("Failed to create account: %s", exc)
            raise StorageError("Failed to register user") from exc
        doc["_id"] = result.inserted_id
        return doc
