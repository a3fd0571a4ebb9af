"""Typer CLI entry point for odds lookups.

- odds-backend lookup americanfootball_nfl --team "Kansas City Chiefs" --books draftkings,fanduel
- odds-backend version
"""

import asyncio
import json
import logging
import uuid

from dotenv import load_dotenv

# Load .env file before settings are read
load_dotenv()

import typer
from rich.console import Console

from odds_backend import __version__
from odds_backend.api.config import get_settings
from odds_backend.cli.formatters import format_best_price_table, format_status
from odds_backend.lines import OddsFetcher, OddsRequest
from odds_backend.lines.parsing import parse_books
from odds_backend.monitoring import bind_request_id, configure_logging

cli = typer.Typer(
    name="odds-backend",
    help="""Best-price odds lookup across sportsbooks via The Odds API.

QUICK START:
  odds-backend lookup americanfootball_nfl --team Chiefs --books draftkings,fanduel
  odds-backend lookup basketball_nba --market ats --team "Boston Celtics" --spread-point -3.5 --books fanduel
  odds-backend lookup americanfootball_nfl --market o/u --side under --total-point 46.5 --books betmgm
""",
    add_completion=False,
)

console = Console()


@cli.command()
def lookup(
    sport_key: str = typer.Argument(..., help="Odds API sport key (e.g., americanfootball_nfl)"),
    market: str = typer.Option("h2h", "--market", "-m", help="Market: ml/h2h, spread/ats, total/o-u"),
    team: str = typer.Option(None, "--team", "-t", help="Team to price and to find the event by"),
    side: str = typer.Option(None, "--side", "-s", help="Over or Under (totals)"),
    spread_point: float = typer.Option(None, "--spread-point", help="Desired spread line"),
    total_point: float = typer.Option(None, "--total-point", help="Desired total line"),
    books: str = typer.Option("", "--books", "-b", help="Comma-separated bookmaker keys"),
    line: str = typer.Option(None, "--line", "-l", help="Fallback American odds (e.g., -110)"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show request and client logs"),
):
    """Look up the best price for a selection across sportsbooks.

    \b
    EXAMPLES:
      odds-backend lookup americanfootball_nfl -t Chiefs -b draftkings,fanduel
      odds-backend lookup americanfootball_nfl -m totals -s over --total-point 44.5 -b fanduel
      odds-backend lookup americanfootball_nfl -t Chiefs -l -120 --json
    """
    settings = get_settings()
    configure_logging(
        settings.environment,
        level=logging.INFO if verbose else logging.ERROR,
    )

    bind_request_id(str(uuid.uuid4()))

    fetcher = OddsFetcher(
        settings.odds_api_config(),
        strict_markets=settings.strict_markets,
    )
    request = OddsRequest(
        sport_key=sport_key,
        market=market,
        team=team,
        side=side,
        spread_point=spread_point,
        total_point=total_point,
        books=parse_books(books),
        line=line,
    )
    result = asyncio.run(fetcher.fetch_odds_and_normalize(request))

    if as_json:
        typer.echo(json.dumps({"ok": True, "result": result.to_result()}))
        return

    console.print(format_best_price_table(result))
    console.print(f"Lookup: {format_status(result)}")


@cli.command()
def version():
    """Show version and configuration info."""
    settings = get_settings()
    console.print(f"[bold cyan]Odds Backend[/bold cyan] v{__version__}")
    console.print()
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Odds API: {'✓ configured' if settings.odds_api_key else '✗ missing ODDS_API_KEY'}")
    console.print(f"  Base URL: {settings.odds_api_base}")
    console.print(f"  Unknown markets: {'mapped to h2h' if settings.strict_markets else 'passed through'}")


if __name__ == "__main__":
    cli()
