from fastapi import APIRouter, Depends, Security
from fastapi.security import HTTPAuthorizationCredentials
from app.modules.auth.schemas import LoginRequest, RegisterRequest, TokenResponse, RegisterResponse
from app.modules.auth.service import AuthService
from app.core.dependencies import get_auth_service, get_current_user_id, security
from app.core.errors import Unauthenticated
from typing import Dict, Optional

router = APIRouter(prefix="/auth", tags=["auth"])


def get_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> str:
    """Extract JWT token from Authorization header"""
    if credentials is None:
        raise Unauthenticated()
    return credentials.credentials


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    register_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Register a new user"""
    return service.register(register_data)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Sign in and get an access token"""
    return service.login(login_data)


@router.post("/logout", status_code=200)
async def logout(
    token: str = Depends(get_current_token),
    service: AuthService = Depends(get_auth_service)
):
    service.logout(token)
    return {"message": "Logged out successfully"}


@router.get("/me")
async def get_current_user(current_user: Dict = Depends(get_current_user_id)):
    """Current authenticated user"""
    return current_user
