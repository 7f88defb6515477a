# =============================================
# app/api/v1/router.py
# =============================================
from fastapi import APIRouter

from app.api.v1.endpoints import auth, profile, users

# =============================================
# API ROUTER
# =============================================
api_router = APIRouter()

# =============================================
# PROFILE ROUTES
# =============================================
api_router.include_router(
    profile.router,
    prefix="/profile",
    tags=["Profile"],
    responses={
        400: {"description": "Invalid profile data or no profile"},
        401: {"description": "Unauthorized"}
    }
)

# =============================================
# REGISTRATION ROUTES
# =============================================
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"],
    responses={
        400: {"description": "Invalid data or user already exists"}
    }
)

# =============================================
# AUTHENTICATION ROUTES
# =============================================
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
    responses={
        400: {"description": "Invalid credentials"},
        401: {"description": "Unauthorized"}
    }
)
