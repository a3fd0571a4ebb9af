"""Odds format conversion and market name normalization.

Converts American odds into the two forms the lookup reports:
- Decimal: 2.5, 1.6667 (total payout per unit staked)
- Implied probability: 40.0, 60.0 (break-even win rate, in percentage points)

Also maps the many ways callers spell a market ("ML", "ats", "o/u") onto the
market keys The Odds API understands.
"""

from typing import Any

from odds_backend.lines.models import ConvertedOdds, MarketKey
from odds_backend.lines.parsing import parse_point

MARKET_ALIASES: dict[str, MarketKey] = {
    "ml": "h2h",
    "moneyline": "h2h",
    "h2h": "h2h",
    "spread": "spreads",
    "spreads": "spreads",
    "ats": "spreads",
    "total": "totals",
    "totals": "totals",
    "o/u": "totals",
    "ou": "totals",
}

DEFAULT_MARKET: MarketKey = "h2h"


def parse_american(value: Any) -> float | None:
    """Read American odds from a number or numeric string.

    Returns None for anything that is not a finite, non-zero number. Blank
    strings count as missing, and a leading "+" is accepted ("+150").
    """
    odds = parse_point(value)
    if odds is None or odds == 0:
        return None
    return odds


def american_to_decimal(american_odds: float) -> float:
    """Convert American odds to decimal odds.

    Examples:
        >>> american_to_decimal(150)
        2.5
        >>> american_to_decimal(-200)
        1.5
    """
    if american_odds > 0:
        # +150 means win 150 on 100 staked = 250 returned on 100 = 2.5
        return 1 + american_odds / 100
    # -200 means risk 200 to win 100 = 300 returned on 200 = 1.5
    return 1 + 100 / abs(american_odds)


def american_to_implied_probability(american_odds: float) -> float:
    """Convert American odds to implied probability (0.0 to 1.0).

    Examples:
        >>> american_to_implied_probability(150)
        0.4
        >>> american_to_implied_probability(-150)
        0.6
    """
    if american_odds > 0:
        return 100 / (american_odds + 100)
    return abs(american_odds) / (abs(american_odds) + 100)


def from_american(value: Any) -> ConvertedOdds:
    """Convert American odds to rounded decimal odds and implied percentage.

    Args:
        value: American odds as a number or numeric string (e.g., -150, "+120")

    Returns:
        ConvertedOdds with decimal rounded to 4 places and implied probability
        as a percentage rounded to 2 places. Both are None when the value is
        missing, non-numeric, non-finite or zero.

    Examples:
        >>> from_american(150)
        ConvertedOdds(decimal=2.5, implied_pct=40.0)
        >>> from_american(-150)
        ConvertedOdds(decimal=1.6667, implied_pct=60.0)
        >>> from_american("")
        ConvertedOdds(decimal=None, implied_pct=None)
    """
    odds = parse_american(value)
    if odds is None:
        return ConvertedOdds()
    return ConvertedOdds(
        decimal=round(american_to_decimal(odds), 4),
        implied_pct=round(american_to_implied_probability(odds) * 100, 2),
    )


def normalize_market(value: Any, strict: bool = False) -> str:
    """Map a user-supplied market name onto an Odds API market key.

    Args:
        value: Market name in any case ("ML", "Spreads", "o/u", ...)
        strict: When True, unrecognized names fall back to "h2h". When False
            they pass through lower-cased so other Odds API markets still work.

    Returns:
        "h2h", "spreads", "totals", or the lower-cased input when not strict.
        Empty or missing input always gives "h2h".

    Examples:
        >>> normalize_market("ML")
        'h2h'
        >>> normalize_market("o/u")
        'totals'
        >>> normalize_market("player_points")
        'player_points'
        >>> normalize_market("player_points", strict=True)
        'h2h'
    """
    name = "" if value is None else str(value).strip().lower()
    if not name:
        return DEFAULT_MARKET
    if name in MARKET_ALIASES:
        return MARKET_ALIASES[name]
    return DEFAULT_MARKET if strict else name
