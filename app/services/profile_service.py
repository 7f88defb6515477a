# =============================================
# app/services/profile_service.py
# =============================================
from typing import Any, Dict, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.repositories.profile_repository import ProfileRepository
from app.database.models.profile import Profile
from app.schemas.profile import ProfileUpsert, ProfileResponse
from app.schemas.experience import ExperienceCreate
from app.schemas.education import EducationCreate
from app.core.exceptions import ProfileNotFoundError
from app.core.validators import normalize_url

logger = logging.getLogger(__name__)

# Optional columns written only when the request carries them
OPTIONAL_FIELDS = ("company", "location", "bio", "github_username")

class ProfileService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.profile_repo = ProfileRepository(db)

    # =============================================
    # UPSERT
    # =============================================

    @staticmethod
    def build_profile_fields(profile_data: ProfileUpsert) -> Dict[str, Any]:
        """
        Turn a validated request body into profile column values.

        ``website`` and ``social`` are always written: the website is
        normalised (or stored empty) and the social mapping is replaced by
        the populated, normalised links of this request.
        """
        provided = profile_data.model_fields_set
        fields: Dict[str, Any] = {
            "status": profile_data.status,
            "skills": list(profile_data.skills),
            "website": normalize_url(profile_data.website),
            "social": {
                network: normalize_url(link)
                for network, link in profile_data.social_links().items()
            },
        }
        for name in OPTIONAL_FIELDS:
            if name in provided:
                fields[name] = getattr(profile_data, name)
        return fields

    async def upsert_profile(self, user_id: UUID, profile_data: ProfileUpsert) -> ProfileResponse:
        """Create or update the caller's profile"""
        fields = self.build_profile_fields(profile_data)
        profile = await self.profile_repo.upsert(user_id, fields)

        logger.info(f"Profile saved for user {user_id}")
        return ProfileResponse.model_validate(profile)

    # =============================================
    # READS
    # =============================================

    async def get_my_profile(self, user_id: UUID) -> ProfileResponse:
        profile = await self.profile_repo.get_by_user(user_id)
        if not profile:
            raise ProfileNotFoundError("Profile not found")
        return ProfileResponse.model_validate(profile)

    async def list_profiles(self) -> List[ProfileResponse]:
        profiles = await self.profile_repo.get_all()
        return [ProfileResponse.model_validate(profile) for profile in profiles]

    async def get_profile_by_user(self, user_id: str) -> ProfileResponse:
        """Public lookup; a malformed id is reported like a missing profile"""
        try:
            parsed_id = UUID(user_id)
        except ValueError:
            raise ProfileNotFoundError("Profile not found")

        profile = await self.profile_repo.get_by_user(parsed_id)
        if not profile:
            raise ProfileNotFoundError("Profile not found")
        return ProfileResponse.model_validate(profile)

    # =============================================
    # EXPERIENCE / EDUCATION
    # =============================================

    async def add_experience(self, user_id: UUID, experience_data: ExperienceCreate) -> ProfileResponse:
        profile = await self._require_profile(user_id)
        profile = await self.profile_repo.add_experience(profile, experience_data)

        logger.info(f"Experience added to profile {profile.profile_id}")
        return ProfileResponse.model_validate(profile)

    async def remove_experience(self, user_id: UUID, experience_id: str) -> ProfileResponse:
        profile = await self._require_profile(user_id)
        entry_id = self._parse_entry_id(experience_id)
        if entry_id is not None:
            profile = await self.profile_repo.remove_experience(profile, entry_id)
        return ProfileResponse.model_validate(profile)

    async def add_education(self, user_id: UUID, education_data: EducationCreate) -> ProfileResponse:
        profile = await self._require_profile(user_id)
        profile = await self.profile_repo.add_education(profile, education_data)

        logger.info(f"Education added to profile {profile.profile_id}")
        return ProfileResponse.model_validate(profile)

    async def remove_education(self, user_id: UUID, education_id: str) -> ProfileResponse:
        profile = await self._require_profile(user_id)
        entry_id = self._parse_entry_id(education_id)
        if entry_id is not None:
            profile = await self.profile_repo.remove_education(profile, entry_id)
        return ProfileResponse.model_validate(profile)

    # =============================================
    # HELPERS
    # =============================================

    async def _require_profile(self, user_id: UUID) -> Profile:
        profile = await self.profile_repo.get_by_user(user_id)
        if not profile:
            raise ProfileNotFoundError()
        return profile

    @staticmethod
    def _parse_entry_id(entry_id: str):
        # No entry can match an id that is not a UUID
        try:
            return UUID(entry_id)
        except ValueError:
            return None
