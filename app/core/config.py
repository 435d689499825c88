"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Powerlog API"
    VERSION: str = "0.1.0"
    DESCRIPTION: str = "Strength-training log: workouts, versioned plans, coaching and social follows."

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./data/powerlog.db"
    SQL_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    # Security
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    REFRESH_TOKEN_EXPIRE_DAYS: int = 30
    MAX_SESSIONS_PER_USER: int = 5
    BCRYPT_ROUNDS: int = 10

    # HTTP
    API_PREFIX: str = ""
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """Database URL with hosted-Postgres SSL mode relaxed for self-signed certificates."""
        return self.DATABASE_URL.replace("sslmode=require", "sslmode=prefer")


# Global settings instance
settings = Settings()
