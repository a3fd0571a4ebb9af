"""Lines - fetches sportsbook odds and finds the best price.

This module provides:
- Pydantic models for The Odds API payload (GameOdds, BookmakerOdds, Market, Outcome)
- Odds conversion and market normalization (from_american, normalize_market)
- Outcome selection within a market (pick_outcome)
- The best-price lookup (OddsFetcher)
"""

from odds_backend.lines.models import (
    PROVIDED_BOOK,
    BestPrice,
    BookmakerOdds,
    ConvertedOdds,
    FetchResult,
    FetchStatus,
    GameOdds,
    Market,
    MarketKey,
    OddsRequest,
    Outcome,
    SelectionCriteria,
)
from odds_backend.lines.normalizer import from_american, normalize_market
from odds_backend.lines.selector import pick_outcome
from odds_backend.lines.fetcher import OddsFetcher, prefer_higher_decimal

__all__ = [
    # Models
    "PROVIDED_BOOK",
    "BestPrice",
    "BookmakerOdds",
    "ConvertedOdds",
    "FetchResult",
    "FetchStatus",
    "GameOdds",
    "Market",
    "MarketKey",
    "OddsRequest",
    "Outcome",
    "SelectionCriteria",
    # Conversion and selection
    "from_american",
    "normalize_market",
    "pick_outcome",
    # Lookup
    "OddsFetcher",
    "prefer_higher_decimal",
]
