# =============================================
# app/database/models/user.py
# =============================================
from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.config.database import Base
import uuid

class User(Base):
    __tablename__ = "users"

    # Primary Key
    user_id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        index=True
    )

    # Basic Info
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    avatar = Column(String(512), nullable=True)

    # Dates
    created_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # =============================================
    # RELATIONSHIPS
    # =============================================
    profile = relationship("Profile", back_populates="user", uselist=False, lazy="select")
    posts = relationship("Post", back_populates="user", lazy="select")

    def __repr__(self):
        return f"<User(user_id={self.user_id}, name='{self.name}', email='{self.email}')>"
