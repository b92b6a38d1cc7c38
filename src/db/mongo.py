from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from typing import Optional
from src.core.config import MONGO_URL, DB_NAME

_client: Optional[AsyncIOMotorClient] = None
_client_loop = None


async def get_db() -> AsyncIOMotorDatabase:
    """
    Returns a database instance bound to the running event loop.
    """
    global _client
    global _client_loop
    import asyncio
    loop = asyncio.get_running_loop()
    if _client is None or _client_loop is None or _client_loop != loop:
        _client = AsyncIOMotorClient(MONGO_URL)
        _client_loop = loop
    return _client[DB_NAME]


def close_client() -> None:
    global _client
    global _client_loop
    if _client is not None:
        _client.close()
    _client = None
    _client_loop = None
