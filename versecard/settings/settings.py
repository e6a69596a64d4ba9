"""
Environment-driven configuration for the verse card service.

Uses pydantic-settings for type-safe environment variable management.
Deployment-specific settings are configured via environment variables
(prefix ``VERSECARD_``) or a .env file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VERSES_PATH = str(Path(__file__).resolve().parent.parent / "data" / "verses.json")


class Environment(str, Enum):
    """Deployment environment."""
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variable names are ``VERSECARD_`` + the uppercase field name.
    """

    model_config = SettingsConfigDict(
        env_prefix="VERSECARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    app_name: str = "Verse Card"
    app_version: str = "1.0.0"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    # === Server ===
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # CORS - comma-separated list of allowed origins
    allowed_origins: str = "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173,http://127.0.0.1:3000"

    # === Verse store ===
    verses_path: str = DEFAULT_VERSES_PATH

    # JSON file for the shuffle order; in-memory when unset
    progress_path: Optional[str] = None

    # Optional JSON overrides for versecard.config
    config_path: Optional[str] = None

    # === Card layout ===
    card_max_length: int = 25

    # === Logging ===
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # === Rate Limiting ===
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 120
    rate_limit_window: int = 60  # seconds

    def get_allowed_origins_list(self) -> List[str]:
        """Parse comma-separated origins into list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def rate_limit(self) -> str:
        """Limit string understood by slowapi (e.g. "120 per 60 seconds")."""
        return f"{self.rate_limit_requests} per {self.rate_limit_window} seconds"

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the application.

    Returns:
        Settings instance with values from environment
    """
    return Settings()
