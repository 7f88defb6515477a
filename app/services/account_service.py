# =============================================
# app/services/account_service.py
# =============================================
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.repositories.post_repository import PostRepository
from app.repositories.profile_repository import ProfileRepository
from app.repositories.user_repository import UserRepository
from app.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

class AccountService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.post_repo = PostRepository(db)
        self.profile_repo = ProfileRepository(db)
        self.user_repo = UserRepository(db)

    async def delete_account(self, user_id: UUID) -> None:
        """
        Remove a user together with everything they own.

        Order: posts, then the profile (with its experience and education
        entries), then the user. All three deletes share one transaction.
        """
        try:
            posts_deleted = await self.post_repo.delete_by_user(user_id)
            await self.profile_repo.delete_by_user(user_id)
            await self.user_repo.delete(user_id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error deleting account {user_id}: {e}")
            raise DatabaseError("delete account", str(e))

        logger.info(f"Account {user_id} deleted ({posts_deleted} posts)")
