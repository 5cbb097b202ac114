"""Runtime settings, read from SSHCA_* environment variables or a .env file."""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """sshca_core settings."""

    # Storage
    SSHCA_STORAGE_PROVIDER: str = "sqlite"  # sqlite or memory
    SSHCA_DB_PATH: str = "db/sshca_state.db"

    # Logging
    SSHCA_LOG_LEVEL: str = "INFO"
    SSHCA_LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
