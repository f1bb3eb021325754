"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Model schemas: extra directory of *.json schema files (bundled ones always load)
    SCHEMA_DIR: str = ""

    # Validation
    REQUIRED_ALLOWS_WHITESPACE: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
