# =============================================
# app/schemas/education.py
# =============================================
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from typing import Optional
from datetime import date
from uuid import UUID

from app.core.validators import validate_date_range

class EducationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(..., max_length=255, description="School or institution")
    degree: str = Field(..., max_length=255, description="Degree or certificate")
    field_of_study: str = Field(..., alias="fieldofstudy", max_length=255, description="Field of study")
    from_date: date = Field(..., alias="from", description="Start date")
    to_date: Optional[date] = Field(None, alias="to", description="End date (null if current)")
    current: bool = Field(False, description="Still studying here")
    description: Optional[str] = None

    @field_validator('school', 'degree', 'field_of_study')
    @classmethod
    def validate_required_text(cls, v, info):
        if not v or not v.strip():
            label = "Field of study" if info.field_name == "field_of_study" else info.field_name.capitalize()
            raise ValueError(f"{label} is required")
        return v.strip()

    @model_validator(mode='after')
    def validate_dates(self):
        validate_date_range(self.from_date, self.to_date, self.current)
        return self

class EducationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    education_id: UUID
    school: str
    degree: str
    field_of_study: str = Field(..., alias="fieldofstudy")
    from_date: date = Field(..., alias="from")
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None
