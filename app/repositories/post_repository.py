# =============================================
# app/repositories/post_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete
from uuid import UUID

from app.database.models.post import Post

class PostRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every post of a user. The caller owns the transaction."""
        result = await self.db.execute(delete(Post).where(Post.user_id == user_id))
        return result.rowcount
