"""
Configuration settings for the Wash Bay Manager.
Uses Pydantic for type-safe configuration management.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Wash Bay Manager"
    app_version: str = "1.0.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Database
    database_url: str = "postgresql+asyncpg://washbay_user:washbay_pass@db:5432/washbay_db"

    # Security
    secret_key: str = "your-secret-key-change-this-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 1440  # 24 hours

    # The single account allowed into the admin screens
    admin_email: str = "admin@example.com"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # API
    api_v1_prefix: str = "/api/v1"

    # Shop
    locale: str = "en"
    timezone: str = "America/Sao_Paulo"
    currency_symbol: str = "R$"
    shop_name: str = "Wash Bay"
    shop_review_url: str = ""
    whatsapp_country_code: str = "55"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
