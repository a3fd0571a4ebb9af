"""Shared pytest fixtures for odds backend tests."""

import pytest

from odds_backend.lines.api import OddsAPIConfig
from odds_backend.monitoring import configure_logging

BASE_URL = "https://odds.test"


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure structlog for test output."""
    configure_logging("development")


@pytest.fixture
def api_config():
    """Odds API config pointing at a fake host with a key set."""
    return OddsAPIConfig(base_url=BASE_URL, api_key="test_key")


@pytest.fixture
def nfl_events():
    """Two NFL events in The Odds API format (oddsFormat=american)."""
    return [
        {
            "id": "evt001",
            "sport_key": "americanfootball_nfl",
            "commence_time": "2026-10-18T17:00:00Z",
            "home_team": "Buffalo Bills",
            "away_team": "Miami Dolphins",
            "bookmakers": [
                {
                    "key": "draftkings",
                    "title": "DraftKings",
                    "markets": [
                        {
                            "key": "h2h",
                            "outcomes": [
                                {"name": "Buffalo Bills", "price": -250},
                                {"name": "Miami Dolphins", "price": 205},
                            ],
                        }
                    ],
                }
            ],
        },
        {
            "id": "evt002",
            "sport_key": "americanfootball_nfl",
            "commence_time": "2026-10-18T20:25:00Z",
            "home_team": "Kansas City Chiefs",
            "away_team": "New England Patriots",
            "bookmakers": [
                {
                    "key": "draftkings",
                    "title": "DraftKings",
                    "markets": [
                        {
                            "key": "h2h",
                            "outcomes": [
                                {"name": "Kansas City Chiefs", "price": -150},
                                {"name": "New England Patriots", "price": 130},
                            ],
                        },
                        {
                            "key": "spreads",
                            "outcomes": [
                                {"name": "Kansas City Chiefs", "price": -110, "point": -3},
                                {"name": "New England Patriots", "price": -110, "point": 3},
                            ],
                        },
                        {
                            "key": "totals",
                            "outcomes": [
                                {"name": "Over", "price": -108, "point": 46.5},
                                {"name": "Under", "price": -112, "point": 46.5},
                            ],
                        },
                    ],
                },
                {
                    "key": "fanduel",
                    "title": "FanDuel",
                    "markets": [
                        {
                            "key": "h2h",
                            "outcomes": [
                                {"name": "Kansas City Chiefs", "price": -140},
                                {"name": "New England Patriots", "price": 120},
                            ],
                        },
                        {
                            "key": "spreads",
                            "outcomes": [
                                {"name": "Kansas City Chiefs", "price": -105, "point": -2.5},
                                {"name": "New England Patriots", "price": -115, "point": 2.5},
                            ],
                        },
                        {
                            "key": "totals",
                            "outcomes": [
                                {"name": "Over", "price": -105, "point": 47.5},
                                {"name": "Under", "price": -115, "point": 47.5},
                            ],
                        },
                    ],
                },
                {
                    "key": "betmgm",
                    "title": "BetMGM",
                    "markets": [
                        {
                            "key": "h2h",
                            "outcomes": [
                                {"name": "Kansas City Chiefs", "price": -160},
                                {"name": "New England Patriots", "price": 135},
                            ],
                        }
                    ],
                },
            ],
        },
    ]
