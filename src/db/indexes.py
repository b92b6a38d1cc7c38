import pymongo
from src.core.logging import logger
from src.db.mongo import get_db


async def create_indexes(db=None) -> None:
    """
    Create the indexes the stores rely on: the unique constraints that turn
    duplicate emails and complaint ids into errors, and the date-ordered
    indexes behind the complaint listings.
    """
    if db is None:
        db = await get_db()

    complaints = db.complaints
    await complaints.create_index([("complaintId", pymongo.ASCENDING)], unique=True)
    await complaints.create_index([("date", pymongo.DESCENDING)])
    await complaints.create_index([
        ("createdByEmail", pymongo.ASCENDING),
        ("date", pymongo.DESCENDING)
    ])
    await complaints.create_index([("attachmentPath", pymongo.ASCENDING)], sparse=True)

    users = db.users
    await users.create_index([("email", pymongo.ASCENDING)], unique=True)

    logger.info("MongoDB indexes ensured on %s", db.name)
