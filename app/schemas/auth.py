# =============================================
# app/schemas/auth.py
# =============================================
from pydantic import BaseModel, EmailStr, Field

class LoginRequest(BaseModel):
    """Schema for login request"""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")

class TokenResponse(BaseModel):
    """Signed access token returned by registration and login"""
    token: str = Field(..., description="JWT access token")
