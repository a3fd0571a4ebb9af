"""Best-price lookup across sportsbooks.

OddsFetcher ties the pieces together for one request:
1. Normalize the market name and seed the result with the caller's line
2. Make a single Odds API call (when a key, sport and books are available)
3. Pick the event, then the matching outcome from each bookmaker's market
4. Keep the highest decimal price seen

Upstream failures never reach the caller. They are logged and recorded on the
FetchResult, and the lookup answers with whatever it already knew.
"""

from collections.abc import Callable, Sequence
from typing import Any

import httpx

from odds_backend.lines.api.odds_api import OddsAPIClient, OddsAPIConfig, OddsAPIError
from odds_backend.lines.models import (
    PROVIDED_BOOK,
    BestPrice,
    BookmakerOdds,
    FetchResult,
    FetchStatus,
    GameOdds,
    OddsRequest,
    SelectionCriteria,
)
from odds_backend.lines.normalizer import from_american, normalize_market
from odds_backend.lines.selector import pick_outcome
from odds_backend.monitoring import get_logger

log = get_logger()

BetterPrice = Callable[[BestPrice, BestPrice], bool]


def prefer_higher_decimal(candidate: BestPrice, incumbent: BestPrice) -> bool:
    """Default ranking: a strictly higher payout multiplier wins."""
    return candidate.decimal > incumbent.decimal


def american_str(price: Any) -> str:
    """String form of American odds, dropping a spurious ".0" from floats."""
    if isinstance(price, float) and price.is_integer():
        return str(int(price))
    return str(price)


def seed_from_line(line: Any) -> BestPrice | None:
    """Build the starting best price from a caller-provided American line."""
    if line is None or (isinstance(line, str) and not line.strip()):
        return None
    converted = from_american(line)
    return BestPrice(
        book=PROVIDED_BOOK,
        american=american_str(line.strip() if isinstance(line, str) else line),
        decimal=converted.decimal,
        implied_pct=converted.implied_pct,
    )


def select_event(events: Sequence[GameOdds], team: str | None) -> GameOdds:
    """First event mentioning the team (substring, any case), else the first event."""
    if team:
        needle = team.lower()
        for event in events:
            if needle in event.home_team.lower() or needle in event.away_team.lower():
                return event
    return events[0]


class OddsFetcher:
    """Looks up the best available price for one selection.

    Args:
        config: Odds API connection settings
        client: Odds API client (built from config when omitted)
        strict_markets: Map unrecognized market names to "h2h" instead of
            passing them through
        is_better: Ranking used to replace the current best price
    """

    def __init__(
        self,
        config: OddsAPIConfig,
        client: OddsAPIClient | None = None,
        strict_markets: bool = False,
        is_better: BetterPrice = prefer_higher_decimal,
    ) -> None:
        self.config = config
        self.client = client or OddsAPIClient(config)
        self.strict_markets = strict_markets
        self.is_better = is_better

    def can_fetch(self, request: OddsRequest) -> bool:
        """Whether the lookup may call the Odds API at all."""
        return bool(self.config.is_configured and request.sport_key and request.books)

    async def fetch_odds_and_normalize(self, request: OddsRequest) -> FetchResult:
        """Find the best price for the request across the requested books.

        Args:
            request: Sport, market, selection criteria, books and seed line

        Returns:
            FetchResult whose `best` is the highest-paying price among the seed
            line and every usable bookmaker price. `status` records whether the
            network was skipped, failed, returned nothing or produced prices.
        """
        market = normalize_market(request.market, strict=self.strict_markets)
        result = FetchResult(
            market=market,
            status=FetchStatus.SKIPPED,
            best=seed_from_line(request.line),
        )

        if not self.can_fetch(request):
            log.info(
                "odds_fetch_skipped",
                sport_key=request.sport_key,
                api_configured=self.config.is_configured,
                book_count=len(request.books),
                seeded=result.best is not None,
            )
            return result

        try:
            events = await self.client.get_odds(request.sport_key, market, request.books)
        except (OddsAPIError, httpx.HTTPError, httpx.InvalidURL) as e:
            log.warning(
                "odds_fetch_failed",
                sport_key=request.sport_key,
                market=market,
                error=str(e) or type(e).__name__,
                error_type=type(e).__name__,
            )
            result.status = FetchStatus.UPSTREAM_FAILED
            result.error = str(e) or type(e).__name__
            return result

        if not events:
            result.status = FetchStatus.NO_EVENTS
            return result

        event = select_event(events, request.team)
        for bookmaker in event.bookmakers:
            self._consider(bookmaker, market, request.criteria, result)

        result.status = FetchStatus.FOUND if result.books_scanned else FetchStatus.NO_MATCH
        return result

    def _consider(
        self,
        bookmaker: BookmakerOdds,
        market: str,
        criteria: SelectionCriteria,
        result: FetchResult,
    ) -> None:
        """Fold one bookmaker's price for the selection into the result."""
        book_market = next(
            (m for m in bookmaker.markets if m.key.lower() == market), None
        )
        if book_market is None:
            return

        outcome = pick_outcome(market, book_market.outcomes, criteria)
        if outcome is None or outcome.price is None:
            return

        converted = from_american(outcome.price)
        if converted.is_empty:
            return

        result.books_scanned.append(bookmaker.key)
        candidate = BestPrice(
            book=bookmaker.key,
            american=american_str(outcome.price),
            decimal=converted.decimal,
            implied_pct=converted.implied_pct,
            picked_point=outcome.point,
        )

        best = result.best
        if best is None or best.decimal is None or self.is_better(candidate, best):
            log.debug(
                "best_price_updated",
                book=candidate.book,
                american=candidate.american,
                decimal=candidate.decimal,
            )
            result.best = candidate
