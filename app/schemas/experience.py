# =============================================
# app/schemas/experience.py
# =============================================
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from typing import Optional
from datetime import date
from uuid import UUID

from app.core.validators import validate_date_range

# =============================================
# CREATE SCHEMA
# =============================================
class ExperienceCreate(BaseModel):
    """New experience entry, inserted at the top of the list"""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., max_length=255, description="Job title")
    company: str = Field(..., max_length=255, description="Company name")
    location: Optional[str] = Field(None, max_length=255)
    from_date: date = Field(..., alias="from", description="Start date")
    to_date: Optional[date] = Field(None, alias="to", description="End date (null if current)")
    current: bool = Field(False, description="Still working here")
    description: Optional[str] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v or not v.strip():
            raise ValueError("Title is required")
        return v.strip()

    @field_validator('company')
    @classmethod
    def validate_company(cls, v):
        if not v or not v.strip():
            raise ValueError("Company is required")
        return v.strip()

    @model_validator(mode='after')
    def validate_dates(self):
        validate_date_range(self.from_date, self.to_date, self.current)
        return self

# =============================================
# RESPONSE SCHEMA
# =============================================
class ExperienceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    experience_id: UUID
    title: str
    company: str
    location: Optional[str] = None
    from_date: date = Field(..., alias="from")
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None
