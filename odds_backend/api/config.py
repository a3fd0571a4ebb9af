"""Configuration management for the odds backend API.

Settings are loaded from environment variables using pydantic-settings.
A missing Odds API key is not an error: lookups then answer from the
caller-provided line only.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from odds_backend.lines.api import OddsAPIConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    - ODDS_API_BASE: The Odds API root (default: https://api.the-odds-api.com)
    - ODDS_API_KEY: The Odds API key (default: empty, network lookups disabled)
    - ODDS_API_TIMEOUT: Outbound request timeout in seconds (default: 5.0)
    - STRICT_MARKETS: Map unknown market names to h2h (default: false)
    - ENVIRONMENT: Runtime environment (default: development)
    """

    odds_api_base: str = Field(default="https://api.the-odds-api.com")
    odds_api_key: str = Field(default="", description="The Odds API key")
    odds_api_timeout: float = Field(default=5.0, gt=0, le=120)
    strict_markets: bool = Field(
        default=False,
        description="Map unrecognized market names to h2h instead of passing them through",
    )
    environment: str = Field(default="development")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def odds_api_config(self) -> OddsAPIConfig:
        """Connection settings handed to the odds fetcher."""
        return OddsAPIConfig(
            base_url=self.odds_api_base,
            api_key=self.odds_api_key,
            timeout=self.odds_api_timeout,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance (singleton).

    Settings are loaded once at startup and reused throughout application lifetime.
    """
    return Settings()
