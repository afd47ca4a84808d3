"""
Application Configuration
All settings loaded from environment variables (or a local .env file).
"""
from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CALENDAR_READONLY_SCOPE = "https://www.googleapis.com/auth/calendar.readonly"


class Settings(BaseSettings):
    """Application settings from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Google OAuth client
    client_id: str
    client_secret: str
    redirect_uri: str
    scopes: List[str] = [CALENDAR_READONLY_SCOPE]

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: str = "*"
    log_level: str = "INFO"

    @field_validator("client_id", "client_secret", "redirect_uri")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
