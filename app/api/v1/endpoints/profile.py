# =============================================
# app/api/v1/endpoints/profile.py
# =============================================
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, List
from uuid import UUID

from app.config.database import get_db
from app.config.settings import get_settings
from app.core.auth import get_current_user_id
from app.services.profile_service import ProfileService
from app.services.account_service import AccountService
from app.services.github_service import GithubService
from app.schemas.profile import ProfileUpsert, ProfileResponse
from app.schemas.experience import ExperienceCreate
from app.schemas.education import EducationCreate

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

# =============================================
# DEPENDENCIES
# =============================================
async def get_profile_service(db: AsyncSession = Depends(get_db)) -> ProfileService:
    return ProfileService(db)

async def get_account_service(db: AsyncSession = Depends(get_db)) -> AccountService:
    return AccountService(db)

def get_github_service() -> GithubService:
    return GithubService(get_settings())

# =============================================
# PROFILE ROUTES
# =============================================

@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    user_id: UUID = Depends(get_current_user_id),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """
    Get the caller's profile

    **Requires authentication**
    """
    return await profile_service.get_my_profile(user_id)

@router.post("", response_model=ProfileResponse)
async def upsert_profile(
    profile_data: ProfileUpsert,
    user_id: UUID = Depends(get_current_user_id),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """
    Create or update the caller's profile

    **Requires authentication**

    - **status**: Professional status (required)
    - **skills**: List of tags or a comma separated string (required)
    - **website** and social links are normalised to https URLs
    - **githubusername**: GitHub login used by the repository lookup
    """
    return await profile_service.upsert_profile(user_id, profile_data)

@router.get("", response_model=List[ProfileResponse])
async def list_profiles(
    profile_service: ProfileService = Depends(get_profile_service)
):
    """List every profile with its owner's name and avatar"""
    return await profile_service.list_profiles()

@router.get("/user/{user_id}", response_model=ProfileResponse)
async def get_profile_by_user(
    user_id: str,
    profile_service: ProfileService = Depends(get_profile_service)
):
    return await profile_service.get_profile_by_user(user_id)

@router.delete("")
async def delete_account(
    user_id: UUID = Depends(get_current_user_id),
    account_service: AccountService = Depends(get_account_service)
) -> Dict[str, str]:
    """
    Delete the caller's posts, profile and account

    **Requires authentication**
    """
    await account_service.delete_account(user_id)
    return {"msg": "User deleted"}

# =============================================
# EXPERIENCE ROUTES
# =============================================

@router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    experience_data: ExperienceCreate,
    user_id: UUID = Depends(get_current_user_id),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """
    Add an experience entry to the front of the caller's list

    **Requires authentication**

    - **title**, **company** and **from** are required
    - **to** must be empty when **current** is true
    """
    return await profile_service.add_experience(user_id, experience_data)

@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
async def remove_experience(
    exp_id: str,
    user_id: UUID = Depends(get_current_user_id),
    profile_service: ProfileService = Depends(get_profile_service)
):
    return await profile_service.remove_experience(user_id, exp_id)

# =============================================
# EDUCATION ROUTES
# =============================================

@router.put("/education", response_model=ProfileResponse)
async def add_education(
    education_data: EducationCreate,
    user_id: UUID = Depends(get_current_user_id),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """
    Add an education entry to the front of the caller's list

    **Requires authentication**

    - **school**, **degree**, **fieldofstudy** and **from** are required
    """
    return await profile_service.add_education(user_id, education_data)

@router.delete("/education/{edu_id}", response_model=ProfileResponse)
async def remove_education(
    edu_id: str,
    user_id: UUID = Depends(get_current_user_id),
    profile_service: ProfileService = Depends(get_profile_service)
):
    return await profile_service.remove_education(user_id, edu_id)

# =============================================
# GITHUB ROUTES
# =============================================

@router.get("/github/{username}")
async def get_github_repos(
    username: str,
    github_service: GithubService = Depends(get_github_service)
) -> List[Any]:
    """Latest five public repositories of a GitHub user, as returned by GitHub"""
    return await github_service.get_repos(username)
