"""The Odds API client for fetching sportsbook odds.

This module provides an async client for The Odds API (https://the-odds-api.com)
v4 odds endpoint. One lookup makes at most one request; there is no retry.
Remaining API credits are tracked from response headers.
"""

import time
from dataclasses import dataclass
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from odds_backend.lines.models import GameOdds
from odds_backend.monitoring import get_logger

log = get_logger()

DEFAULT_BASE_URL = "https://api.the-odds-api.com"
DEFAULT_TIMEOUT = 5.0
LOW_CREDITS_THRESHOLD = 50


class OddsAPIError(RuntimeError):
    """The Odds API answered with an error status or an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class OddsAPIConfig:
    """Connection settings for The Odds API.

    Attributes:
        base_url: API root without the version segment
        api_key: API key; empty disables lookups
        timeout: Request timeout in seconds
    """

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    timeout: float = DEFAULT_TIMEOUT

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.api_key)


class OddsAPIClient:
    """Async client for The Odds API.

    Attributes:
        config: Base URL, key and timeout used for requests
        remaining_credits: Number of API credits remaining (from last response)
        used_credits: Number of API credits used this month (from last response)
    """

    def __init__(self, config: OddsAPIConfig) -> None:
        self.config = config
        self.remaining_credits: int | None = None
        self.used_credits: int | None = None

    def odds_url(self, sport_key: str) -> str:
        base = self.config.base_url.rstrip("/")
        return f"{base}/v4/sports/{quote(sport_key, safe='')}/odds/"

    async def get_odds(
        self,
        sport_key: str,
        market: str,
        bookmakers: list[str] | tuple[str, ...],
    ) -> list[GameOdds]:
        """Fetch current odds for one sport, market and set of bookmakers.

        Args:
            sport_key: Odds API sport key (e.g., "americanfootball_nfl")
            market: Market key ("h2h", "spreads", "totals", ...)
            bookmakers: Bookmaker keys to include

        Returns:
            Events as returned upstream, each with its bookmakers' markets.

        Raises:
            OddsAPIError: Non-success status, invalid JSON or unexpected shape.
            httpx.HTTPError: Transport failures (connect errors, timeouts).
        """
        start_time = time.perf_counter()

        params = {
            "regions": "us",
            "markets": market,
            "oddsFormat": "american",
            "bookmakers": ",".join(bookmakers),
            "apiKey": self.config.api_key,
        }

        log.info(
            "odds_api_request_started",
            sport_key=sport_key,
            market=market,
            bookmakers=list(bookmakers),
        )

        url = self.odds_url(sport_key)
        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            response = await client.get(url, params=params)

        if response.is_error:
            raise OddsAPIError(
                f"GET {url} -> {response.status_code}",
                status_code=response.status_code,
            )

        self._track_credits(response)

        try:
            payload = response.json()
        except ValueError as e:
            raise OddsAPIError(
                f"GET {url} returned an unusable payload (json)",
                status_code=response.status_code,
            ) from e
        if not isinstance(payload, list):
            raise OddsAPIError(
                f"GET {url} returned an unusable payload (shape)",
                status_code=response.status_code,
            )

        games = self._parse_events(payload)

        duration_ms = int((time.perf_counter() - start_time) * 1000)
        log.info(
            "odds_api_request_completed",
            event_count=len(games),
            duration_ms=duration_ms,
            credits_remaining=self.remaining_credits,
            credits_used=self.used_credits,
        )

        return games

    @staticmethod
    def _parse_events(payload: list) -> list[GameOdds]:
        """Validate events one at a time so a bad entry only costs itself."""
        games = []
        skipped = 0
        for raw in payload:
            if not isinstance(raw, dict):
                skipped += 1
                continue
            try:
                games.append(GameOdds.model_validate(raw))
            except ValidationError as e:
                skipped += 1
                log.debug("odds_api_event_invalid", error_count=e.error_count())
        if skipped:
            log.warning("odds_api_events_skipped", skipped=skipped, kept=len(games))
        return games

    def _track_credits(self, response: httpx.Response) -> None:
        """Record credit usage headers and warn when running low."""
        remaining = response.headers.get("x-requests-remaining")
        used = response.headers.get("x-requests-used")
        if remaining and remaining.isdigit():
            self.remaining_credits = int(remaining)
        if used and used.isdigit():
            self.used_credits = int(used)

        if (
            self.remaining_credits is not None
            and self.remaining_credits < LOW_CREDITS_THRESHOLD
        ):
            log.warning(
                "low_api_credits",
                remaining=self.remaining_credits,
                message="Consider reducing request frequency",
            )
