from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import AnyHttpUrl, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Only the HTTP surface and the search transport read these; decoding itself is configuration free.
    """

    # App
    APP_NAME: str = Field(default="Jira Records", description="Application display name")
    APP_ENV: str = Field(default="development", description="Application environment")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    ALLOW_ORIGINS: List[str] = Field(
        default=["*"], description="CORS allowed origins list"
    )

    # Auth
    API_KEY_HEADER_NAME: str = Field(
        default="X-API-Key", description="Header name used to pass API key"
    )
    API_KEYS: List[str] = Field(
        default=[], description="List of allowed API keys"
    )

    # JIRA (only needed for /search)
    JIRA_BASE_URL: Optional[AnyHttpUrl] = Field(
        default=None, description="Base URL for JIRA instance, e.g., https://your-domain.atlassian.net"
    )
    JIRA_EMAIL: Optional[str] = Field(default=None, description="JIRA account email for API auth")
    JIRA_API_TOKEN: Optional[str] = Field(default=None, description="JIRA API token for API auth")

    # HTTP
    REQUEST_TIMEOUT_SECONDS: float = Field(
        default=30.0, description="Default request timeout in seconds for outbound HTTP"
    )
    MAX_DOCUMENT_BYTES: int = Field(
        default=10 * 1024 * 1024, ge=1, description="Largest request body accepted by /decode"
    )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    @model_validator(mode="after")
    def _validate_auth(self) -> "Settings":
        if not self.API_KEYS:
            raise ValueError("API_KEYS must contain at least one key")
        return self

    @property
    def jira_configured(self) -> bool:
        return bool(self.JIRA_BASE_URL and self.JIRA_EMAIL and self.JIRA_API_TOKEN)


# PUBLIC_INTERFACE
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings instance."""
    return Settings()
