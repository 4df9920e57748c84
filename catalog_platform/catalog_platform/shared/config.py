"""
Configuration management for the catalog platform services
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Settings shared by the auth and product services, loaded from environment variables"""

    # Runtime
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # Database Configuration
    AUTH_DATABASE_URL: str = "sqlite:///./auth.db"
    PRODUCT_DATABASE_URL: str = "sqlite:///./products.db"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    # JWT Configuration
    JWT_SECRET_KEY: str = "change-this-secret-in-prod-at-least-32-bytes"
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "catalog-platform-auth"
    JWT_AUDIENCE: str = "catalog-platform"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    # Product search
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Requests
    REQUEST_TIMEOUT_SECONDS: float = 30.0

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() in ("local", "development", "dev")


# Global settings instance
settings = Settings()
