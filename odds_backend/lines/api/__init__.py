"""Clients for upstream odds sources."""

from odds_backend.lines.api.odds_api import OddsAPIClient, OddsAPIConfig, OddsAPIError

__all__ = ["OddsAPIClient", "OddsAPIConfig", "OddsAPIError"]
