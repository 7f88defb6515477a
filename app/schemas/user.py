# =============================================
# app/schemas/user.py
# =============================================
from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

# Registration body
class UserCreate(BaseModel):
    name: str = Field(..., max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., max_length=72, description="Password (6 or more characters)")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        if len(v) < 6:
            raise ValueError("Please enter a password with 6 or more characters")
        return v

# Public view (no password)
class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    name: str
    email: EmailStr
    avatar: Optional[str] = None
    created_date: Optional[datetime] = None
