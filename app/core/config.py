"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is read here from the environment or a .env file.
Invalid values fail fast with a pydantic ValidationError at import time.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_PORT = 1
MAX_PORT = 65_535
MAX_APP_NAME_LENGTH = 100


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        app_name: Display name for the API (APP_NAME, 1-100 chars).
        version: Current API version string.
        host: Interface the server binds to.
        port: Port the server listens on (PORT, 1-65535).
        debug: Enable debug mode. Must be False in production.
        docs_enabled: Serve Swagger UI and ReDoc.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_enabled: Enforce per-client rate limits.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    app_name: str = Field(
        default="Backend API", min_length=1, max_length=MAX_APP_NAME_LENGTH
    )
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=MIN_PORT, le=MAX_PORT)
    debug: bool = False
    docs_enabled: bool = True
    log_level: str = "INFO"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()
