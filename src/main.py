from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from src.api.routes import router
from src.core.config import CORS_ORIGINS, UPLOAD_DIR
from src.core.exceptions import ComplaintDeskError, StorageError
from src.core.logging import logger
from src.db.indexes import create_indexes
from src.db.mongo import close_client
from src.services.attachment_store import AttachmentStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    AttachmentStore(UPLOAD_DIR).ensure_root()
    await create_indexes()
    logger.info("Complaint service started")
    yield
    close_client()


app = FastAPI(title="Complaint Desk", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ComplaintDeskError)
async def complaint_desk_error_handler(request: Request, exc: ComplaintDeskError):
    if isinstance(exc, StorageError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"error": f"{location}: {message}" if location else message}
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(router)
