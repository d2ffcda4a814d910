"""
Configuration settings for the FullContact client.

All settings are loaded from environment variables prefixed with
FULLCONTACT_ (e.g. FULLCONTACT_API_KEY). A local .env file is honoured.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="FULLCONTACT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Logging ===
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    
    # === API ===
    API_KEY: Optional[str] = None  # Falls back to FC_API_KEY when unset
    BASE_URL: str = "https://api.fullcontact.com/v3/"
    
    # === HTTP transport ===
    TIMEOUT_SECONDS: float = 60.0
    MAX_CONNECTIONS: int = 100
    MAX_KEEPALIVE_CONNECTIONS: int = 20
    
    # === Retry ===
    RETRY_ATTEMPTS: int = 1  # Clamped to MAX_RETRY_ATTEMPTS at dispatch time
    RETRY_DELAY_MILLIS: int = 1000
    RETRYABLE_STATUS_CODES: list[int] = [429, 503]


# Global settings instance
settings = Settings()
