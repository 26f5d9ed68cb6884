"""Configuration management for sheet2rss."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCE_URL_TEMPLATE = (
    "https://docs.google.com/spreadsheets/d/{key}/export?format=csv"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    ``SPREADSHEET_KEY`` and ``PORT`` are read without a prefix; every other
    setting uses the ``SHEET2RSS_`` prefix.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SHEET2RSS_",
        extra="ignore",
        populate_by_name=True,
    )

    # Source spreadsheet
    spreadsheet_key: str = Field(
        validation_alias=AliasChoices("SPREADSHEET_KEY", "spreadsheet_key")
    )
    source_url_template: str = DEFAULT_SOURCE_URL_TEMPLATE
    fetch_timeout_seconds: float = Field(default=30.0, gt=0)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(
        default=8000, ge=1, le=65535, validation_alias=AliasChoices("PORT", "port")
    )

    # Feed settings
    max_entries: int = Field(default=20, ge=1)
    feed_title: str = "Federal Government 2017"
    feed_link: str = "http://jlord.us/federal-gov/"
    feed_description: str = "Summaries of events from the US Government."

    # Terminate the process when the startup refresh fails
    exit_on_refresh_failure: bool = True

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")

    @property
    def source_url(self) -> str:
        """Spreadsheet CSV export URL for the configured key."""
        return self.source_url_template.format(key=self.spreadsheet_key)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()  # type: ignore[call-arg]
    return _settings
