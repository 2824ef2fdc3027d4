"""Application configuration settings."""

import typing as t

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "AidConnect"
    app_version: str = "1.0.0"
    debug: bool = False
    seed_demo_data: bool = True

    # Database
    database_url: str = "sqlite+aiosqlite:///./aidconnect.db"

    # AI assistance (disabled when no key is set)
    groq_api_key: str = ""
    groq_model: str = "llama-3.3-70b-versatile"
    groq_timeout_seconds: float = 30.0

    # Ignored keyword classification
    keyword_refresh_interval_minutes: int = 30

    # CORS
    cors_origins: t.List[str] = ["*"]

    @property
    def ai_enabled(self) -> bool:
        """Whether the AI collaborator is configured."""
        return bool(self.groq_api_key)


SETTINGS = Settings()
