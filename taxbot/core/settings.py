"""Application settings management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings loaded from environment variables."""

    app_name: str = "Income Tax Chatbot"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    bot_name: str = Field(default="Jacob", alias="TAXBOT_BOT_NAME")
    federal_rate: float = Field(default=0.12, ge=0, le=1, alias="TAXBOT_FEDERAL_RATE")
    state_rate: float = Field(default=0.05, ge=0, le=1, alias="TAXBOT_STATE_RATE")
    max_sessions: int = Field(default=1000, ge=1, alias="TAXBOT_MAX_SESSIONS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
