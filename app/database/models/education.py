# =============================================
# app/database/models/education.py
# =============================================
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.config.database import Base
from datetime import datetime, timezone
import uuid

class Education(Base):
    __tablename__ = "educations"

    # Primary Key
    education_id = Column(
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

    # Academic Info
    school = Column(String(255), nullable=False)
    degree = Column(String(255), nullable=False)
    field_of_study = Column(String(255), nullable=False)
    from_date = Column(Date, nullable=False)
    to_date = Column(Date, nullable=True)
    current = Column(Boolean, default=False, nullable=False)
    description = Column(Text, nullable=True)

    position = Column(Integer, nullable=False, default=0)
    # Microsecond precision; breaks ties between entries saved with the same position
    created_date = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )

    profile = relationship("Profile", back_populates="education")

    def __repr__(self):
        return f"<Education(education_id={self.education_id}, degree='{self.degree}', school='{self.school}')>"
