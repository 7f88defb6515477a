# =============================================
# app/database/models/profile.py
# =============================================
from sqlalchemy import Column, String, Text, DateTime, JSON, ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.config.database import Base
from app.database.models.experience import Experience
from app.database.models.education import Education
import uuid

class Profile(Base):
    __tablename__ = "profiles"

    # Primary Key
    profile_id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        index=True
    )

    # One profile per user; the upsert conflicts on this column
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey('users.user_id', ondelete='CASCADE'),
        nullable=False,
        unique=True,
        index=True
    )

    # Profile Info
    company = Column(String(255), nullable=True)
    website = Column(String(512), nullable=True)
    location = Column(String(255), nullable=True)
    status = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    github_username = Column(String(255), nullable=True)
    skills = Column(JSON, nullable=False, default=list)
    social = Column(JSON, nullable=False, default=dict)

    # Audit Fields
    created_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_date = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    # =============================================
    # RELATIONSHIPS
    # =============================================
    user = relationship("User", back_populates="profile", lazy="joined")

    # Newest entry first
    experience = relationship(
        "Experience",
        back_populates="profile",
        lazy="selectin",
        order_by=[Experience.position.desc(), Experience.created_date.desc()],
        cascade="all, delete-orphan"
    )

    education = relationship(
        "Education",
        back_populates="profile",
        lazy="selectin",
        order_by=[Education.position.desc(), Education.created_date.desc()],
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Profile(profile_id={self.profile_id}, user_id={self.user_id}, status='{self.status}')>"
