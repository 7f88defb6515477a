# =============================================
# app/main.py
# =============================================
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging
import time
import uvicorn

from app.config.settings import get_settings
from app.config.database import create_tables, close_database, check_database_health
from app.api.v1.router import api_router
from app.core.exceptions import (
    AppException,
    UserAlreadyExistsError,
    InvalidCredentialsError,
    DatabaseError,
)
from app.core.exception_handlers import (
    request_validation_error_handler,
    user_already_exists_handler,
    invalid_credentials_handler,
    database_error_handler,
    app_exception_handler,
    sqlalchemy_error_handler,
    http_exception_handler,
    global_exception_handler,
)

# =============================================
# SETTINGS
# =============================================
settings = get_settings()

# =============================================
# LOGGING CONFIGURATION
# =============================================
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)

# =============================================
# LIFESPAN CONTEXT MANAGER
# =============================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")

    await create_tables()

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_database()

# =============================================
# FASTAPI APPLICATION
# =============================================
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    Developer profiles and social network backend.

    ## Features

    * **Registration and login**: Token based authentication
    * **Profiles**: One profile per user, created or updated in a single call
    * **Experience and education**: Newest-first entries embedded in the profile
    * **GitHub**: Latest public repositories of a profile's GitHub user
    * **Account deletion**: Removes posts, profile and user together
    """,
    version=settings.VERSION,
    openapi_tags=[
        {
            "name": "Profile",
            "description": "Developer profiles, experience and education",
        },
        {
            "name": "Users",
            "description": "User registration",
        },
        {
            "name": "Authentication",
            "description": "Login and token inspection",
        },
        {
            "name": "Health",
            "description": "Health checks and API status",
        },
    ],
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# =============================================
# MIDDLEWARE CONFIGURATION
# =============================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and processing time"""
    start_time = time.time()
    logger.info(f"Request: {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(
        f"Response: {request.method} {request.url.path} - "
        f"Status: {response.status_code} - Time: {process_time:.4f}s"
    )
    return response

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Process-Time"],
)

# ==========================================
# EXCEPTION HANDLERS
# ==========================================
# Request body and path validation
@app.exception_handler(RequestValidationError)
async def handle_request_validation(request, exc):
    return await request_validation_error_handler(request, exc)

@app.exception_handler(UserAlreadyExistsError)
async def handle_user_already_exists(request, exc):
    return await user_already_exists_handler(request, exc)

@app.exception_handler(InvalidCredentialsError)
async def handle_invalid_credentials(request, exc):
    return await invalid_credentials_handler(request, exc)

@app.exception_handler(DatabaseError)
async def handle_database_error(request, exc):
    return await database_error_handler(request, exc)

# Remaining application exceptions
@app.exception_handler(AppException)
async def handle_app_exception(request, exc):
    return await app_exception_handler(request, exc)

@app.exception_handler(SQLAlchemyError)
async def handle_sqlalchemy_error(request, exc):
    return await sqlalchemy_error_handler(request, exc)

@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request, exc):
    return await http_exception_handler(request, exc)

# Must stay last
@app.exception_handler(Exception)
async def handle_global_exception(request, exc):
    return await global_exception_handler(request, exc)

# ==========================================
# ROUTERS
# ==========================================
app.include_router(api_router, prefix=settings.API_PREFIX)

# ==========================================
# BASIC ROUTES
# ==========================================
@app.get("/", tags=["Health"])
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.VERSION,
        "health": "/health"
    }

@app.get("/health", tags=["Health"])
async def health():
    """Health check with a database round trip"""
    database_ok = await check_database_health()
    return {
        "status": "healthy" if database_ok else "degraded",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "database": "connected" if database_ok else "disconnected"
    }

# =============================================
# DEVELOPMENT SERVER
# =============================================
if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info" if settings.DEBUG else "warning",
        access_log=settings.DEBUG
    )
