from fastapi import APIRouter
from src.api.endpoints.auth import router as auth_router
from src.api.endpoints.complaints import router as complaints_router
from src.api.endpoints.health import router as health_router

router = APIRouter()

router.include_router(health_router)
router.include_router(auth_router)
router.include_router(complaints_router)
