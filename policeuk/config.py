"""Client configuration using Pydantic settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POLICE_UK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # data.police.uk API
    base_url: str = "https://data.police.uk/api"

    # Transport settings (only used when the client builds its own httpx client)
    timeout: float = 30.0
    user_agent: str = "policeuk/0.1.0"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
