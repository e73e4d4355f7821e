"""12-factor configuration adapter using environment variables."""

from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LANGUAGES = ("hr", "en")
SUPPORTED_TRANSPORT_MODES = ("road", "sea")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VIS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Transport API configuration
    api_base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the municipal transport API",
    )
    api_timeout_seconds: int = Field(
        default=10, description="Timeout for transport API requests in seconds"
    )

    # Client identity sent with every request
    device_id: str = Field(default="vis-timetables-cli", description="Value of X-Device-ID")
    user_mode: str = Field(default="visitor", description="Value of X-User-Mode")
    municipality: str | None = Field(
        default=None, description="Value of X-Municipality (e.g. 'vis' or 'komiza')"
    )
    banner_screen: str = Field(
        default="transport", description="Screen context used when fetching banners"
    )

    # Display configuration
    language: str = Field(default="hr", description="Display language: 'hr' or 'en'")
    default_transport_mode: str = Field(
        default="sea", description="Transport mode when none is given: 'road' or 'sea'"
    )
    timezone: str = Field(
        default="Europe/Zagreb",
        description="Timezone that defines 'today' (IANA timezone name)",
    )

    # Static data overrides. When unset, the packaged data files are used.
    carriers_file: str | None = Field(
        default=None, description="Path to a TOML file with carrier and ticket URL tables"
    )
    holidays_file: str | None = Field(
        default=None, description="Path to a JSON file with public holidays"
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language is either 'hr' or 'en'."""
        if v.lower() not in SUPPORTED_LANGUAGES:
            raise ValueError("language must be either 'hr' or 'en'")
        return v.lower()

    @field_validator("default_transport_mode")
    @classmethod
    def validate_transport_mode(cls, v: str) -> str:
        """Validate transport mode is either 'road' or 'sea'."""
        if v.lower() not in SUPPORTED_TRANSPORT_MODES:
            raise ValueError("default_transport_mode must be either 'road' or 'sea'")
        return v.lower()

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def today(self) -> date:
        """Current calendar day in the configured timezone."""
        return datetime.now(ZoneInfo(self.timezone)).date()
