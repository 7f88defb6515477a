# =============================================
# app/database/models/__init__.py
# =============================================
"""
Database models.

Importing this package registers every table on Base.metadata, which is
what create_tables() and Alembic autogenerate rely on.
"""

from .user import User
from .profile import Profile
from .experience import Experience
from .education import Education
from .post import Post

__all__ = [
    "User",
    "Profile",
    "Experience",
    "Education",
    "Post",
]
