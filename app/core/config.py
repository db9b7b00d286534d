"""
Application Configuration
All settings loaded from environment variables
"""
from pydantic import BaseModel
from typing import Optional
import os


class Settings(BaseModel):
    # ==================== Application ====================
    APP_NAME: str = os.getenv("APP_NAME", "Isupipe")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "isupipe-dev-secret")

    # ==================== Database ====================
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "db")
    POSTGRES_PORT: int = int(os.getenv("POSTGRES_PORT", "5432"))
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "isupipe")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "isupipe")
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "20"))

    # ==================== Redis ====================
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://redis:6379/0")

    # ==================== Celery ====================
    CELERY_BROKER_URL: str = os.getenv("CELERY_BROKER_URL", REDIS_URL)
    CELERY_RESULT_BACKEND: str = os.getenv("CELERY_RESULT_BACKEND", REDIS_URL)
    CELERY_TIMEZONE: str = os.getenv("CELERY_TIMEZONE", "UTC")

    # ==================== Session ====================
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "isupipe_session")
    SESSION_TTL: int = int(os.getenv("SESSION_TTL", "3600"))  # 1 hour
    SESSION_SECURE: bool = os.getenv("SESSION_SECURE", "false").lower() in ("true", "1", "yes")
    COOKIE_EXPIRY: int = int(os.getenv("COOKIE_EXPIRY", "3600"))
    COOKIE_SAME_SITE: str = os.getenv("COOKIE_SAME_SITE", "lax")

    # ==================== Security ====================
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # ==================== Reservation ====================
    RESERVATION_TERM_START: str = os.getenv("RESERVATION_TERM_START", "2023-11-25T01:00:00+00:00")
    RESERVATION_TERM_END: str = os.getenv("RESERVATION_TERM_END", "2024-11-25T01:00:00+00:00")
    RESERVATION_SLOT_CAPACITY: int = int(os.getenv("RESERVATION_SLOT_CAPACITY", "5"))

    # ==================== Users ====================
    FALLBACK_ICON_HASH: str = os.getenv(
        "FALLBACK_ICON_HASH",
        "d9f8294e9d895f81ce62e73dc7d5dff862a4fa40bd4e0fecf53f7526a8edcac0",
    )
    RESERVED_USER_NAMES: str = os.getenv("RESERVED_USER_NAMES", "pipe")

    # ==================== Retention ====================
    VIEWER_LOG_RETENTION_DAYS: int = int(os.getenv("VIEWER_LOG_RETENTION_DAYS", "1"))

    # ==================== Logging ====================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")

    # ==================== CORS ====================
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    CORS_ALLOW_CREDENTIALS: bool = os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"


settings = Settings()
