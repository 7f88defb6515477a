# =============================================
# app/api/v1/endpoints/auth.py
# =============================================
from fastapi import APIRouter, Depends
from uuid import UUID

from app.core.auth import get_current_user_id
from app.api.v1.endpoints.users import get_user_service
from app.services.user_service import UserService
from app.schemas.auth import LoginRequest, TokenResponse
from app.schemas.user import UserResponse

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

# =============================================
# AUTHENTICATION ROUTES
# =============================================

@router.get("", response_model=UserResponse)
async def get_authenticated_user(
    user_id: UUID = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service)
):
    """
    Get the user behind the presented token

    **Requires authentication**
    """
    return await user_service.get_user(user_id)

@router.post("", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    user_service: UserService = Depends(get_user_service)
):
    """Exchange email and password for a token"""
    return await user_service.login(login_data)
