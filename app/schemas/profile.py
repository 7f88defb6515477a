# =============================================
# app/schemas/profile.py
# =============================================
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Dict, List, Optional, Union
from datetime import datetime
from uuid import UUID

from app.core.validators import normalize_skills
from app.schemas.education import EducationResponse
from app.schemas.experience import ExperienceResponse

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")

# =============================================
# UPSERT SCHEMA
# =============================================
class ProfileUpsert(BaseModel):
    """
    Body of ``POST /profile``.

    ``skills`` may be a list of tags or a single comma separated string;
    either way it is validated into a list of trimmed tags.
    """
    model_config = ConfigDict(populate_by_name=True)

    company: Optional[str] = Field(None, max_length=255)
    website: Optional[str] = Field(None, max_length=512)
    location: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = None
    status: str = Field(..., max_length=255, description="Professional status")
    github_username: Optional[str] = Field(None, alias="githubusername", max_length=255)
    skills: Union[List[str], str] = Field(..., description="Skill tags")

    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        if not v or not v.strip():
            raise ValueError("Status is required")
        return v.strip()

    @field_validator('skills')
    @classmethod
    def validate_skills(cls, v):
        skills = normalize_skills(v)
        if not skills:
            raise ValueError("Skills is required")
        return skills

    def social_links(self) -> Dict[str, str]:
        """Populated social links, keyed by network"""
        links = {}
        for network in SOCIAL_NETWORKS:
            value = getattr(self, network)
            if value and value.strip():
                links[network] = value
        return links

# =============================================
# RESPONSE SCHEMAS
# =============================================
class ProfileUser(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    name: str
    avatar: Optional[str] = None

class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    profile_id: UUID
    user: ProfileUser
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: str
    github_username: Optional[str] = Field(None, alias="githubusername")
    skills: List[str] = []
    social: Dict[str, str] = {}
    experience: List[ExperienceResponse] = []
    education: List[EducationResponse] = []
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None
