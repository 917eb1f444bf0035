from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.gaming.chainsafe.io/v1"


class Settings(BaseSettings):
    """Plugin configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_url: str = Field(default=DEFAULT_API_URL, validation_alias="MARKETPLACE_API_URL")
    default_account: str | None = Field(default=None, validation_alias="MARKETPLACE_DEFAULT_ACCOUNT")
    provider_url: str | None = Field(default=None, validation_alias="WEB3_PROVIDER_URI")
    project_id: str | None = Field(default=None, validation_alias="MARKETPLACE_PROJECT_ID")
    marketplace_id: str | None = Field(default=None, validation_alias="MARKETPLACE_ID")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("default_account", "project_id", "marketplace_id", mode="before")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if value is None or str(value).strip() == "":
            return None
        return str(value).strip()

    def validate_for_run(self) -> list[str]:
        """Check the values the startup script needs. Returns list of errors."""
        errors = []
        if not self.project_id:
            errors.append("MARKETPLACE_PROJECT_ID is required")
        if not self.marketplace_id:
            errors.append("MARKETPLACE_ID is required")
        if not self.api_url.startswith(("http://", "https://")):
            errors.append("MARKETPLACE_API_URL must be an http(s) URL")
        return errors


settings = Settings()
