# =============================================
# app/repositories/profile_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from typing import Any, Dict, List, Optional
from uuid import UUID
import logging

from app.database.models.profile import Profile
from app.database.models.experience import Experience
from app.database.models.education import Education
from app.schemas.experience import ExperienceCreate
from app.schemas.education import EducationCreate
from app.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT DO UPDATE
UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

class ProfileRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    # =============================================
    # UPSERT
    # =============================================

    async def upsert(self, user_id: UUID, fields: Dict[str, Any]) -> Profile:
        """
        Create the user's profile or overwrite ``fields`` on the existing one.

        Runs as a single ``INSERT ... ON CONFLICT (user_id) DO UPDATE``
        statement, so concurrent calls for one user can never produce two
        rows. Columns missing from ``fields`` keep their stored values.
        """
        dialect = self.db.get_bind().dialect.name
        insert = UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise DatabaseError("upsert profile", f"dialect '{dialect}' has no atomic upsert")

        stmt = insert(Profile).values(user_id=user_id, **fields)
        update_values = {key: stmt.excluded[key] for key in fields}
        update_values["updated_date"] = func.now()
        stmt = stmt.on_conflict_do_update(
            index_elements=[Profile.user_id],
            set_=update_values
        )

        try:
            await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error upserting profile for user {user_id}: {e}")
            raise DatabaseError("upsert profile", str(e))

        return await self.get_by_user(user_id)

    # =============================================
    # QUERIES
    # =============================================

    async def get_by_user(self, user_id: UUID) -> Optional[Profile]:
        """Get a user's profile with user, experience and education loaded"""
        try:
            stmt = (
                select(Profile)
                .where(Profile.user_id == user_id)
                .execution_options(populate_existing=True)
            )
            result = await self.db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error getting profile for user {user_id}: {e}")
            raise DatabaseError("get profile", str(e))

    async def get_all(self) -> List[Profile]:
        """Get every profile, oldest first"""
        try:
            stmt = select(Profile).order_by(Profile.created_date, Profile.profile_id)
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing profiles: {e}")
            raise DatabaseError("list profiles", str(e))

    # =============================================
    # EMBEDDED LISTS
    # =============================================

    async def add_experience(self, profile: Profile, data: ExperienceCreate) -> Profile:
        """Put a new experience entry at the front of the profile's list"""
        entry = Experience(
            profile_id=profile.profile_id,
            position=self._next_position(profile.experience),
            **data.model_dump()
        )
        return await self._save_entry(profile, entry, "add experience")

    async def remove_experience(self, profile: Profile, experience_id: UUID) -> Profile:
        """Drop the matching experience entry; unknown ids leave the list untouched"""
        return await self._remove_entry(
            profile, profile.experience, "experience_id", experience_id, "remove experience"
        )

    async def add_education(self, profile: Profile, data: EducationCreate) -> Profile:
        """Put a new education entry at the front of the profile's list"""
        entry = Education(
            profile_id=profile.profile_id,
            position=self._next_position(profile.education),
            **data.model_dump()
        )
        return await self._save_entry(profile, entry, "add education")

    async def remove_education(self, profile: Profile, education_id: UUID) -> Profile:
        return await self._remove_entry(
            profile, profile.education, "education_id", education_id, "remove education"
        )

    # =============================================
    # DELETE
    # =============================================

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete the user's profile and its entries. The caller owns the transaction."""
        profile_ids = select(Profile.profile_id).where(Profile.user_id == user_id).scalar_subquery()
        await self.db.execute(delete(Experience).where(Experience.profile_id.in_(profile_ids)))
        await self.db.execute(delete(Education).where(Education.profile_id.in_(profile_ids)))
        result = await self.db.execute(delete(Profile).where(Profile.user_id == user_id))
        return result.rowcount

    # =============================================
    # HELPERS
    # =============================================

    @staticmethod
    def _next_position(entries) -> int:
        return max((entry.position for entry in entries), default=0) + 1

    async def _save_entry(self, profile: Profile, entry, operation: str) -> Profile:
        self.db.add(entry)
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error during {operation} on profile {profile.profile_id}: {e}")
            raise DatabaseError(operation, str(e))
        return await self.get_by_user(profile.user_id)

    async def _remove_entry(self, profile: Profile, entries, id_attr: str, entry_id: UUID, operation: str) -> Profile:
        entry = next((e for e in entries if getattr(e, id_attr) == entry_id), None)
        if entry is None:
            return profile

        try:
            await self.db.delete(entry)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error during {operation} on profile {profile.profile_id}: {e}")
            raise DatabaseError(operation, str(e))
        return await self.get_by_user(profile.user_id)
