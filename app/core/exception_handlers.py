# =============================================
# app/core/exception_handlers.py
# =============================================
from fastapi import Request, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from typing import Any, Dict, List
import logging

from app.core.exceptions import (
    AppException,
    UserAlreadyExistsError,
    InvalidCredentialsError,
    DatabaseError,
)

logger = logging.getLogger(__name__)

SERVER_ERROR_BODY = {"msg": "Server error"}


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten pydantic error entries into {msg, param, location} items"""
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        location = loc[0] if loc else "body"
        param = ".".join(loc[1:])

        if error.get("type") == "missing":
            msg = f"{param or 'Request body'} is required"
        else:
            msg = error.get("msg", "Invalid value")
            if msg.startswith("Value error, "):
                msg = msg[len("Value error, "):]

        formatted.append({"msg": msg, "param": param, "location": location})
    return formatted


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle FastAPI/pydantic request validation failures"""
    errors = format_validation_errors(exc.errors())
    logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors}
    )


async def user_already_exists_handler(request: Request, exc: UserAlreadyExistsError) -> JSONResponse:
    """Handle user already exists exceptions"""
    logger.warning(f"User already exists: {exc.details.get('email')}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"errors": [{"msg": exc.message}]}
    )


async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError) -> JSONResponse:
    """Handle failed logins"""
    logger.warning(f"Invalid credentials on {request.url.path}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"errors": [{"msg": exc.message}]}
    )


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    """Handle database errors"""
    logger.error(f"Database error: {exc.message}", extra={"details": exc.details})

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=SERVER_ERROR_BODY
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions"""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"Application exception: {exc.message}", extra={
        "path": request.url.path,
        "method": request.method,
        "details": exc.details
    })

    if exc.status_code >= 500:
        return JSONResponse(status_code=exc.status_code, content=SERVER_ERROR_BODY)

    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": exc.message}
    )


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle SQLAlchemy errors that escaped the repositories"""
    logger.error(f"Database error: {exc}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=SERVER_ERROR_BODY
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle FastAPI HTTP exceptions"""
    logger.warning(f"HTTP exception: {exc.status_code} - {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=SERVER_ERROR_BODY
    )
