from fastapi import APIRouter, Depends, status
from src.api.dependencies import get_auth_service
from src.db.models import LoginRequest, RegisterRequest, UserEnvelope
from src.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    user = await auth_service.register(payload.email, payload.password, payload.role)
    return {"message": "User registered successfully", "user": user}


@router.post("/login", response_model=UserEnvelope)
async def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    user = await auth_service.login(payload.email, payload.password)
    return {"message": "Login successful", "user": user}
