# =============================================
# app/api/v1/endpoints/users.py
# =============================================
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.database import get_db
from app.services.user_service import UserService
from app.schemas.user import UserCreate
from app.schemas.auth import TokenResponse

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)

# =============================================
# REGISTRATION
# =============================================

@router.post("", response_model=TokenResponse)
async def register_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    """
    Register a new user

    - **name**: Display name (required)
    - **email**: Unique email address
    - **password**: At least 6 characters

    Returns a signed token for the new account.
    """
    return await user_service.register(user_data)
