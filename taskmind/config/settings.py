"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "TaskMind API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @field_validator("intent_ml_url")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    @model_validator(mode="after")
    def validate_timeouts_positive(self) -> "Settings":
        for field_name in ("intent_ml_timeout", "db_retry_delay", "db_retry_backoff"):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        return self

    @model_validator(mode="after")
    def validate_page_sizes(self) -> "Settings":
        if self.default_page_size < 1 or self.max_page_size < self.default_page_size:
            raise ValueError(
                "default_page_size must be >= 1 and not larger than max_page_size"
            )
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'], consider restricting in production"
            )
        return self

    # CORS
    allowed_origins: list[str] = ["*"]

    # Relational store (ODBC)
    database_connection_string: str = ""
    db_schema: str = "dbo"
    db_max_retries: int = 5
    db_retry_delay: float = 2.0
    db_retry_backoff: float = 1.5

    # Intent ML enrichment
    intent_ml_url: str | None = None
    intent_ml_timeout: float = 5.0
    enrichment_enabled: bool = True

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
