# =============================================
# app/services/user_service.py
# =============================================
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserResponse
from app.schemas.auth import LoginRequest, TokenResponse
from app.core.exceptions import (
    AuthenticationError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from app.core.security import (
    create_access_token,
    get_password_hash,
    gravatar_url,
    verify_password,
)

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: AsyncSession):
        self.user_repo = UserRepository(db)

    async def register(self, user_data: UserCreate) -> TokenResponse:
        """Create an account and return a signed token for it"""
        email = user_data.email.lower()

        existing_user = await self.user_repo.get_by_email(email)
        if existing_user:
            raise UserAlreadyExistsError(email)

        user = await self.user_repo.create(
            name=user_data.name,
            email=email,
            password_hash=get_password_hash(user_data.password),
            avatar=gravatar_url(email)
        )

        logger.info(f"User registered: {user.user_id}")
        return TokenResponse(token=self._issue_token(user.user_id))

    async def login(self, login_data: LoginRequest) -> TokenResponse:
        user = await self.user_repo.get_by_email(login_data.email.lower())
        if not user or not verify_password(login_data.password, user.password):
            raise InvalidCredentialsError()

        return TokenResponse(token=self._issue_token(user.user_id))

    async def get_user(self, user_id: UUID) -> UserResponse:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise AuthenticationError()
        return UserResponse.model_validate(user)

    @staticmethod
    def _issue_token(user_id: UUID) -> str:
        return create_access_token(data={"sub": str(user_id)})
