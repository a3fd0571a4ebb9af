"""Dependency injection for FastAPI routes."""

from typing import Annotated

from fastapi import Depends

from odds_backend.api.config import Settings, get_settings
from odds_backend.lines import OddsFetcher


def get_app_settings() -> Settings:
    """Wrap the cached get_settings() singleton for FastAPI's Depends()."""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def get_odds_fetcher(settings: SettingsDep) -> OddsFetcher:
    """Build the odds fetcher from application settings.

    A new fetcher per request keeps credit tracking and every other bit of
    lookup state request-scoped.
    """
    return OddsFetcher(
        settings.odds_api_config(),
        strict_markets=settings.strict_markets,
    )


OddsFetcherDep = Annotated[OddsFetcher, Depends(get_odds_fetcher)]
