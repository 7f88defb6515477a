# =============================================
# app/database/models/post.py
# =============================================
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.config.database import Base
import uuid

class Post(Base):
    __tablename__ = "posts"

    post_id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        index=True
    )

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey('users.user_id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    text = Column(Text, nullable=False)
    name = Column(String(255), nullable=True)
    avatar = Column(String(512), nullable=True)
    created_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="posts")

    def __repr__(self):
        return f"<Post(post_id={self.post_id}, user_id={self.user_id})>"
