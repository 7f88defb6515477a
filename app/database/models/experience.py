# =============================================
# app/database/models/experience.py
# =============================================
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.config.database import Base
from datetime import datetime, timezone
import uuid

class Experience(Base):
    __tablename__ = "experiences"

    # Primary Key
    experience_id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        index=True
    )

    profile_id = Column(
        Uuid(as_uuid=True),
        ForeignKey('profiles.profile_id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    # Experience Info
    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    from_date = Column(Date, nullable=False)
    to_date = Column(Date, nullable=True)
    current = Column(Boolean, default=False, nullable=False)
    description = Column(Text, nullable=True)

    # Insertion order inside the profile list
    position = Column(Integer, nullable=False, default=0)
    # Microsecond precision; breaks ties between entries saved with the same position
    created_date = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )

    profile = relationship("Profile", back_populates="experience")

    def __repr__(self):
        return f"<Experience(experience_id={self.experience_id}, title='{self.title}', company='{self.company}')>"
