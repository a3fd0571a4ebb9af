"""Models for odds lookups.

Upstream payloads from The Odds API are parsed into pydantic models that
tolerate missing or junk fields, since a half-populated bookmaker entry should
not discard the rest of the response. Prices stay in American format exactly
as received; conversion happens in the normalizer.

Request and result types are plain dataclasses scoped to a single lookup.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from odds_backend.lines.parsing import parse_point

MarketKey = Literal["h2h", "spreads", "totals"]

# Book identifier for a price supplied by the caller rather than a sportsbook
PROVIDED_BOOK = "provided"


# =============================================================================
# Upstream payload (The Odds API v4, oddsFormat=american)
# =============================================================================


def _text(v: Any) -> str:
    return "" if v is None else str(v)


def _entries(v: Any) -> list:
    """Keep the object-shaped items of a list; anything else is no entries."""
    if not isinstance(v, (list, tuple)):
        return []
    return [item for item in v if isinstance(item, (dict, BaseModel))]


class Outcome(BaseModel):
    """Single betting outcome within a market.

    Attributes:
        name: Team name for h2h/spreads, "Over"/"Under" for totals
        point: Line for spreads/totals (e.g., -2.5, 46.5), None for h2h
        price: American odds as received (number or numeric string)
    """

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    point: float | None = None
    price: Any = None

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> str:
        return _text(v)

    @field_validator("point", mode="before")
    @classmethod
    def coerce_point(cls, v: Any) -> float | None:
        """Drop points that are not finite numbers."""
        return parse_point(v)


class Market(BaseModel):
    """Market offered by a bookmaker (h2h, spreads, totals or other keys)."""

    model_config = ConfigDict(extra="ignore")

    key: str = ""
    outcomes: list[Outcome] = []

    @field_validator("key", mode="before")
    @classmethod
    def coerce_key(cls, v: Any) -> str:
        return _text(v)

    @field_validator("outcomes", mode="before")
    @classmethod
    def coerce_outcomes(cls, v: Any) -> list:
        return _entries(v)


class BookmakerOdds(BaseModel):
    """Odds from a single sportsbook for an event."""

    model_config = ConfigDict(extra="ignore")

    key: str = ""
    title: str = ""
    markets: list[Market] = []

    @field_validator("key", "title", mode="before")
    @classmethod
    def coerce_strings(cls, v: Any) -> str:
        return _text(v)

    @field_validator("markets", mode="before")
    @classmethod
    def coerce_markets(cls, v: Any) -> list:
        return _entries(v)


class GameOdds(BaseModel):
    """One event with the bookmakers quoting it.

    Attributes:
        id: Event identifier from the source API
        sport_key: Sport identifier (e.g., "americanfootball_nfl")
        commence_time: Scheduled start time as returned upstream
        home_team: Home team name
        away_team: Away team name
        bookmakers: Sportsbooks with their markets for this event
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    sport_key: str | None = None
    commence_time: str | None = None
    home_team: str = ""
    away_team: str = ""
    bookmakers: list[BookmakerOdds] = []

    @field_validator("id", "sport_key", "commence_time", mode="before")
    @classmethod
    def coerce_optional_text(cls, v: Any) -> str | None:
        return None if v is None else str(v)

    @field_validator("home_team", "away_team", mode="before")
    @classmethod
    def coerce_team(cls, v: Any) -> str:
        return _text(v)

    @field_validator("bookmakers", mode="before")
    @classmethod
    def coerce_bookmakers(cls, v: Any) -> list:
        return _entries(v)


# =============================================================================
# Lookup request / result
# =============================================================================


@dataclass(frozen=True)
class ConvertedOdds:
    """American odds expressed as decimal price and implied probability.

    Both fields are None when the input could not be converted.
    """

    decimal: float | None = None
    implied_pct: float | None = None

    @property
    def is_empty(self) -> bool:
        return self.decimal is None


@dataclass(frozen=True)
class SelectionCriteria:
    """How to pick one outcome out of a market."""

    team: str | None = None
    side: str | None = None
    spread_point: float | None = None
    total_point: float | None = None


@dataclass(frozen=True)
class OddsRequest:
    """A best-price lookup.

    Attributes:
        sport_key: The Odds API sport key (e.g., "americanfootball_nfl")
        market: Market name as typed by the caller ("ML", "ats", "o/u", ...)
        team: Team to price (h2h/spreads) and to locate the event by
        side: "Over"/"Under" for totals
        spread_point: Desired spread line
        total_point: Desired total line
        books: Bookmaker keys to query, in caller order
        line: Caller-provided American odds used as a seed price
    """

    sport_key: str
    market: str | None = None
    team: str | None = None
    side: str | None = None
    spread_point: float | None = None
    total_point: float | None = None
    books: tuple[str, ...] = ()
    line: str | int | float | None = None

    @property
    def criteria(self) -> SelectionCriteria:
        return SelectionCriteria(
            team=self.team,
            side=self.side,
            spread_point=self.spread_point,
            total_point=self.total_point,
        )


@dataclass
class BestPrice:
    """Best price seen so far during a lookup."""

    book: str
    american: str
    decimal: float | None
    implied_pct: float | None
    picked_point: float | None = None

    @property
    def is_provided(self) -> bool:
        return self.book == PROVIDED_BOOK


class FetchStatus(str, Enum):
    """What happened on the network path of a lookup."""

    SKIPPED = "skipped"
    UPSTREAM_FAILED = "upstream_failed"
    NO_EVENTS = "no_events"
    NO_MATCH = "no_match"
    FOUND = "found"


@dataclass
class FetchResult:
    """Outcome of a lookup.

    The public response shape is the same whether nothing matched, the API
    call was skipped or the API call failed; `status` and `error` keep those
    cases apart for logging and tests.
    """

    market: str
    status: FetchStatus
    best: BestPrice | None = None
    error: str | None = None
    books_scanned: list[str] = field(default_factory=list)

    def to_result(self) -> dict[str, Any]:
        """Render the response mapping returned by GET /odds."""
        best = self.best
        if best is None:
            return {}

        out: dict[str, Any] = {"Market": self.market}
        if not best.is_provided:
            out["Book"] = best.book
        out["Odds"] = best.american
        out["Decimal"] = best.decimal if best.decimal is not None else ""
        out["Implied %"] = f"{best.implied_pct:g}%" if best.implied_pct is not None else ""
        if self.market != "h2h" and best.picked_point is not None:
            out["Point"] = best.picked_point
        return out
