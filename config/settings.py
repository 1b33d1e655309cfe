"""Application settings using Pydantic Settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import List

DEFAULT_DATABASE_NAME = "exercise_tracker"


def database_name_from_url(url: str) -> str:
    """Database name taken from the path of a MongoDB connection string."""
    path = url.split("?", 1)[0].split("://", 1)[-1]
    if "/" not in path:
        return DEFAULT_DATABASE_NAME
    return path.rsplit("/", 1)[-1] or DEFAULT_DATABASE_NAME


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    mongodb_url: str = Field(
        default=f"mongodb://localhost:27017/{DEFAULT_DATABASE_NAME}",
        validation_alias=AliasChoices("mongo_uri", "mongodb_url"),
    )

    # Application Configuration
    app_name: str = "Exercise Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def database_name(self) -> str:
        return database_name_from_url(self.mongodb_url)


# Global settings instance
settings = Settings()
