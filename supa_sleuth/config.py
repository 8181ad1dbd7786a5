"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Telegram Configuration
    bot_token: str = ""
    drop_pending_updates: bool = True

    # Logging
    log_level: str = "INFO"


settings = Settings()
