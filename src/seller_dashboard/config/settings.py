"""Application settings using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Deployment configuration
    deployment_mode: Literal["hf_spaces", "local"] = Field(
        default="local",
        description="Deployment mode: hf_spaces (Hugging Face Spaces) or local",
    )

    # Remote seller API
    seller_api_base_url: str = Field(
        default="http://localhost:3005",
        description="Base address of the seller REST API; every request path is relative to it",
    )
    request_timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds (None waits until the call settles)",
    )
    login_path: str = Field(
        default="/auth/login",
        description="Path of the login endpoint returning a bearer token",
    )

    # Session token storage
    token_store: Literal["file", "memory"] = Field(
        default="file",
        description="Where the session token lives: file (persists across restarts) or memory",
    )
    token_store_path: Path = Field(
        default=Path.home() / ".seller_dashboard" / "session.json",
        description="JSON file holding the session token when token_store=file",
    )
    token_storage_key: str = Field(
        default="token",
        description="Key under which the session token is stored",
    )

    # LangFuse observability configuration
    langfuse_enabled: bool = Field(
        default=False,
        description="Enable LangFuse tracing",
    )
    langfuse_public_key: str | None = Field(
        default=None,
        description="LangFuse public key",
    )
    langfuse_secret_key: str | None = Field(
        default=None,
        description="LangFuse secret key",
    )
    langfuse_host: str = Field(
        default="https://cloud.langfuse.com",
        description="LangFuse host URL",
    )

    # Request activity shown on the Activity tab
    metrics_history_size: int = Field(
        default=50,
        ge=1,
        description="Number of recent API requests kept for the activity log",
    )

    @field_validator("seller_api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid API base URL: {v}. Must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("login_path")
    @classmethod
    def validate_login_path(cls, v: str) -> str:
        """Login path is relative to the base URL."""
        if not v.startswith("/"):
            return f"/{v}"
        return v

    @field_validator("deployment_mode")
    @classmethod
    def validate_deployment_mode(cls, v: str) -> str:
        """Validate deployment mode configuration."""
        if v not in ["hf_spaces", "local"]:
            raise ValueError(f"Invalid deployment mode: {v}. Must be 'hf_spaces' or 'local'")
        return v

    def validate_required_credentials(self) -> None:
        """Disable optional integrations whose credentials are missing."""
        if self.langfuse_enabled:
            if not self.langfuse_public_key or not self.langfuse_secret_key:
                logger.warning("LangFuse is enabled but credentials are missing. Disabling LangFuse tracing.")
                self.langfuse_enabled = False

        if self.deployment_mode == "hf_spaces" and self.token_store == "file":
            logger.warning(
                "File token storage on HuggingFace Spaces would be shared by every visitor. "
                "Falling back to in-memory storage, kept per browser session."
            )
            self.token_store = "memory"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.validate_required_credentials()
    return settings
