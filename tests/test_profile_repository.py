"""Repository level tests for the atomic profile upsert."""
import asyncio
from datetime import date, datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from app.database.models.experience import Experience
from app.database.models.post import Post
from app.database.models.profile import Profile
from app.repositories.profile_repository import ProfileRepository
from app.repositories.user_repository import UserRepository
from app.schemas.experience import ExperienceCreate


async def create_user(session_factory, email="jane@example.com"):
    async with session_factory() as session:
        user = await UserRepository(session).create(
            name="Jane Doe", email=email, password_hash="not-a-real-hash"
        )
        return user.user_id


@pytest.mark.asyncio
async def test_concurrent_upserts_leave_one_profile(session_factory):
    user_id = await create_user(session_factory)

    async def upsert(status):
        async with session_factory() as session:
            return await ProfileRepository(session).upsert(
                user_id, {"status": status, "skills": ["python"], "website": "", "social": {}}
            )

    first, second = await asyncio.gather(upsert("Developer"), upsert("Engineer"))

    assert first.profile_id == second.profile_id
    async with session_factory() as session:
        repo = ProfileRepository(session)
        count = await session.execute(
            select(func.count()).select_from(Profile).where(Profile.user_id == user_id)
        )
        assert count.scalar() == 1
        stored = await repo.get_by_user(user_id)
        assert stored.status in ("Developer", "Engineer")


@pytest.mark.asyncio
async def test_upsert_only_overwrites_given_fields(session_factory):
    user_id = await create_user(session_factory)

    async with session_factory() as session:
        repo = ProfileRepository(session)
        await repo.upsert(user_id, {"status": "Developer", "skills": ["go"], "company": "Acme"})
        profile = await repo.upsert(user_id, {"status": "Lead", "skills": ["go", "sql"]})

    assert profile.status == "Lead"
    assert profile.skills == ["go", "sql"]
    assert profile.company == "Acme"
    assert profile.updated_date is not None


@pytest.mark.asyncio
async def test_entries_keep_newest_first_order(session_factory):
    user_id = await create_user(session_factory)

    async with session_factory() as session:
        repo = ProfileRepository(session)
        profile = await repo.upsert(user_id, {"status": "Developer", "skills": ["go"]})
        for title in ("First", "Second", "Third"):
            profile = await repo.add_experience(
                profile,
                ExperienceCreate(title=title, company="Acme", from_date=date(2020, 1, 1))
            )

        assert [entry.title for entry in profile.experience] == ["Third", "Second", "First"]

        profile = await repo.remove_experience(profile, profile.experience[1].experience_id)
        assert [entry.title for entry in profile.experience] == ["Third", "First"]

        profile = await repo.add_experience(
            profile,
            ExperienceCreate(title="Fourth", company="Acme", from_date=date(2020, 1, 1))
        )
        assert [entry.title for entry in profile.experience] == ["Fourth", "Third", "First"]


@pytest.mark.asyncio
async def test_entries_sharing_a_position_stay_newest_first(session_factory):
    user_id = await create_user(session_factory)
    saved_at = datetime(2024, 1, 1, tzinfo=timezone.utc)

    async with session_factory() as session:
        repo = ProfileRepository(session)
        profile = await repo.upsert(user_id, {"status": "Developer", "skills": ["go"]})
        # Two requests that read the same list both pick position 1
        session.add_all([
            Experience(
                profile_id=profile.profile_id, title=title, company="Acme",
                from_date=date(2020, 1, 1), position=1,
                created_date=saved_at + timedelta(microseconds=offset)
            )
            for title, offset in (("Older", 0), ("Newer", 250))
        ])
        await session.commit()

        profile = await repo.get_by_user(user_id)

    assert [entry.title for entry in profile.experience] == ["Newer", "Older"]


@pytest.mark.asyncio
async def test_user_relationships_load_on_request(session_factory):
    user_id = await create_user(session_factory)

    async with session_factory() as session:
        profile = await ProfileRepository(session).upsert(
            user_id, {"status": "Developer", "skills": ["go"]}
        )
        session.add(Post(user_id=user_id, text="hello"))
        await session.commit()

        user = await UserRepository(session).get_by_id(user_id)
        await session.refresh(user, attribute_names=["profile", "posts"])

        assert user.profile.profile_id == profile.profile_id
        assert [post.text for post in user.posts] == ["hello"]
