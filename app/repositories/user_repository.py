# =============================================
# app/repositories/user_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Optional
from uuid import UUID
import logging

from app.database.models.user import User
from app.core.exceptions import DatabaseError, UserAlreadyExistsError

logger = logging.getLogger(__name__)

class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, name: str, email: str, password_hash: str, avatar: Optional[str] = None) -> User:
        """Create a new user from an already hashed password"""
        db_user = User(
            name=name,
            email=email,
            password=password_hash,
            avatar=avatar
        )

        self.db.add(db_user)
        try:
            await self.db.commit()
            await self.db.refresh(db_user)
            return db_user
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            await self.db.rollback()
            raise UserAlreadyExistsError(email)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error creating user {email}: {e}")
            raise DatabaseError("create user", str(e))

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        try:
            result = await self.db.execute(select(User).where(User.user_id == user_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error getting user by ID {user_id}: {e}")
            raise DatabaseError("get user", str(e))

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        try:
            result = await self.db.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error getting user by email {email}: {e}")
            raise DatabaseError("get user", str(e))

    async def exists(self, user_id: UUID) -> bool:
        """Check if user exists"""
        try:
            result = await self.db.execute(select(User.user_id).where(User.user_id == user_id))
            return result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking if user exists {user_id}: {e}")
            raise DatabaseError("get user", str(e))

    async def delete(self, user_id: UUID) -> int:
        """Delete the user row. The caller owns the transaction."""
        result = await self.db.execute(delete(User).where(User.user_id == user_id))
        return result.rowcount
