"""
InsightChef Configuration
=========================

Centralized application settings.

Built once per process (see ``get_settings``) and handed to request handlers
through FastAPI dependencies. The instance is frozen.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App info
    app_name: str = "InsightChef"
    app_version: str = "1.0.0"

    # LLM provider
    llm_provider: Literal["anthropic", "openai"] = "anthropic"
    llm_max_tokens: int = 4000
    llm_timeout_seconds: float = 90.0

    # Anthropic
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    anthropic_version: str = "2023-06-01"
    anthropic_base_url: str = "https://api.anthropic.com"

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # None = decide from the presence of a credential
    mock_mode: Optional[bool] = None

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3001, validation_alias=AliasChoices("port", "api_port"))
    api_prefix: str = "/api"
    debug: bool = False
    rate_limit: str = "20/minute"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["GET", "POST"]
    cors_allow_headers: list[str] = ["Content-Type"]
    cors_max_age: int = 86400

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @property
    def active_api_key(self) -> str:
        """Credential for the configured provider (may be empty)."""
        if self.llm_provider == "openai":
            return self.openai_api_key.strip()
        return self.anthropic_api_key.strip()

    @property
    def active_model(self) -> str:
        if self.llm_provider == "openai":
            return self.openai_model
        return self.anthropic_model

    @property
    def is_mock_mode(self) -> bool:
        if self.mock_mode is not None:
            return self.mock_mode
        return not self.active_api_key


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
