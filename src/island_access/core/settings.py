"""Application settings and configuration.

This module defines all configuration options for the Island application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Island", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Bearer tokens presented by viewers
    secret_key: str = Field(default="island-dev-secret", alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 30,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Database configuration
    database_url: str = Field(default="sqlite:///./island.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Access resolution guards
    access_max_parent_depth: int = Field(default=32, ge=1, alias="ACCESS_MAX_PARENT_DEPTH")
    access_timeout_seconds: float | None = Field(default=10.0, alias="ACCESS_TIMEOUT_SECONDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def effective_access_timeout(self) -> float | None:
        """Return the access timeout in seconds, or None when disabled.

        A missing, zero or negative value turns the timeout off.
        """
        if self.access_timeout_seconds is None or self.access_timeout_seconds <= 0:
            return None
        return self.access_timeout_seconds


settings = Settings()
