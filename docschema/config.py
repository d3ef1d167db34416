"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """docschema settings loaded from DOCSCHEMA_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Engine
    MAX_DEPTH: int = 32
    CONCURRENT_VALIDATION: bool = True

    model_config = SettingsConfigDict(
        env_prefix="DOCSCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
