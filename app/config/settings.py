# =============================================
# app/config/settings.py
# =============================================
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import List, Optional
from functools import lru_cache

class Settings(BaseSettings):
    """Application settings"""

    # =============================================
    # APP CONFIGURATION
    # =============================================
    APP_NAME: str = Field(default="DevConnector API", description="Application name")
    VERSION: str = Field(default="1.0.0", description="Application version")
    DEBUG: bool = Field(default=False, description="Debug mode")
    API_PREFIX: str = Field(default="/api", description="Prefix for all API routes")

    # =============================================
    # DATABASE CONFIGURATION
    # =============================================
    DATABASE_URL: str = Field(..., description="Async database URL")
    DATABASE_URL_SYNC: Optional[str] = Field(default=None, description="Sync database URL for migrations")

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, v):
        if not v.startswith(('postgresql+asyncpg://', 'sqlite+aiosqlite://')):
            raise ValueError('DATABASE_URL must be a postgresql+asyncpg or sqlite+aiosqlite URL')
        return v

    # =============================================
    # SECURITY CONFIGURATION
    # =============================================
    SECRET_KEY: str = Field(..., description="Secret key for JWT tokens")
    ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=6000, description="Access token expiration in minutes")

    @field_validator('SECRET_KEY')
    @classmethod
    def validate_secret_key(cls, v):
        if len(v) < 32:
            raise ValueError('SECRET_KEY must be at least 32 characters long')
        return v

    # =============================================
    # CORS CONFIGURATION
    # =============================================
    ALLOWED_HOSTS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed origins for CORS"
    )

    # =============================================
    # GITHUB API CONFIGURATION
    # =============================================
    GITHUB_API_URL: str = Field(default="https://api.github.com", description="GitHub REST API base URL")
    GITHUB_TOKEN: Optional[str] = Field(default=None, description="GitHub personal access token")
    GITHUB_TIMEOUT: float = Field(default=10.0, description="GitHub request timeout in seconds")

    # =============================================
    # LOGGING CONFIGURATION
    # =============================================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format"
    )

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'LOG_LEVEL must be one of: {valid_levels}')
        return v.upper()

    # =============================================
    # ENVIRONMENT CONFIGURATION
    # =============================================
    ENVIRONMENT: str = Field(default="development", description="Environment name")

    @field_validator('ENVIRONMENT')
    @classmethod
    def validate_environment(cls, v):
        valid_envs = ['development', 'testing', 'staging', 'production']
        if v not in valid_envs:
            raise ValueError(f'ENVIRONMENT must be one of: {valid_envs}')
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =============================================
    # COMPUTED PROPERTIES
    # =============================================

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def get_database_url(self, async_driver: bool = True) -> str:
        """Get database URL with appropriate driver"""
        if async_driver or not self.DATABASE_URL_SYNC:
            return self.DATABASE_URL
        return self.DATABASE_URL_SYNC

# =============================================
# SETTINGS INSTANCE
# =============================================
@lru_cache()
def get_settings() -> Settings:
    """Get settings instance (cached)"""
    return Settings()

settings = get_settings()
