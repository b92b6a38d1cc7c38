from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError
from src.core.logging import logger
from src.db.mongo import get_db

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Server running with MongoDB"


@router.get("/health")
async def health_check(db=Depends(get_db)):
    try:
        await db.command("ping")
    except PyMongoError as exc:
        logger.warning("Health check failed to reach MongoDB: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "components": {"db": "down"}}
        )
    return {"status": "ok"}
