"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix every router is mounted under.
        database_url: SQLAlchemy URL of the task/user store.
        default_page_size: Page size used when a list request omits `limit`.
        max_page_size: Largest `limit` a list request may ask for.
        rate_limit_enabled: Toggle for the slowapi limiter.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Task API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"

    database_url: str = "sqlite:///./tasks.db"

    default_page_size: int = 10
    max_page_size: int = 100

    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"


settings = Settings()
