# =============================================
# app/core/exceptions.py
# =============================================
from fastapi import status
from typing import Any, Dict, Optional


class AppException(Exception):
    """Base exception class for application-specific errors"""

    def __init__(
        self,
        message: str = "An application error occurred",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ProfileNotFoundError(AppException):
    """Exception raised when a profile is not found"""

    def __init__(self, message: str = "There is no profile for this user"):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"error_type": "PROFILE_NOT_FOUND"}
        )


class UserAlreadyExistsError(AppException):
    """Exception raised when trying to create a user that already exists"""

    def __init__(self, email: str):
        super().__init__(
            message="User already exists",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"email": email, "error_type": "USER_ALREADY_EXISTS"}
        )


class InvalidCredentialsError(AppException):
    """Exception raised when login credentials are invalid"""

    def __init__(self):
        super().__init__(
            message="Invalid credentials",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"error_type": "INVALID_CREDENTIALS"}
        )


class AuthenticationError(AppException):
    """Exception raised when the request carries no usable token"""

    def __init__(self, message: str = "Token is not valid"):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details={"error_type": "AUTHENTICATION_ERROR"}
        )


class GithubProfileNotFoundError(AppException):
    """Exception raised for any failure of the GitHub repository lookup"""

    def __init__(self, username: str, reason: Optional[str] = None):
        super().__init__(
            message="No Github profile found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"username": username, "reason": reason, "error_type": "GITHUB_PROFILE_NOT_FOUND"}
        )


class DatabaseError(AppException):
    """Exception raised when database operations fail"""

    def __init__(self, operation: str, reason: str):
        message = f"Database {operation} failed: {reason}"
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={
                "operation": operation,
                "reason": reason,
                "error_type": "DATABASE_ERROR"
            }
        )
