"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    markup: float = Field(default=3.0, gt=0)
    snapshot_ttl_seconds: int = Field(default=30, ge=0)
    business_name: str = "Home Bakery"
    ticket_footer: str = "Thank you for your purchase!"
    ticket_handle: str | None = None
    default_unit_label: str = "g"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
