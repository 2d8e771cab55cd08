"""
Configuration management for the Credential Service
"""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Credential Service configuration loaded from environment variables"""

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    # Database Configuration
    MONGO_URI: str = "mongodb://localhost:27017/auth"
    MONGO_DB: str = "auth"
    USER_REPOSITORY: str = "mongodb"

    # Token / hashing
    JWT_SECRET: str = "change-this-secret-in-prod"
    BCRYPT_ROUNDS: int = 10

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
