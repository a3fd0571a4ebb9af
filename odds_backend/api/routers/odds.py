"""Best-price odds lookup endpoint."""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from odds_backend.api.deps import OddsFetcherDep
from odds_backend.api.schemas import ErrorResponse, OddsResponse
from odds_backend.lines import OddsRequest
from odds_backend.lines.parsing import parse_books, parse_point
from odds_backend.monitoring import get_logger

log = get_logger()

router = APIRouter(tags=["odds"])


@router.get(
    "/odds",
    response_model=OddsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_odds(
    fetcher: OddsFetcherDep,
    sport_key: str | None = Query(None, alias="sportKey"),
    market: str | None = Query(None),
    team: str | None = Query(None),
    side: str | None = Query(None),
    spread_point: str | None = Query(None, alias="spreadPoint"),
    total_point: str | None = Query(None, alias="totalPoint"),
    books: str | None = Query(None),
    line: str | None = Query(None),
):
    """Best price for a team/side across the requested sportsbooks.

    Falls back to the caller's `line` when the Odds API is not configured,
    fails, or offers nothing for the selection.
    """
    if not sport_key:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="sportKey is required").model_dump(),
        )

    try:
        request = OddsRequest(
            sport_key=sport_key,
            market=market,
            team=team,
            side=side,
            spread_point=parse_point(spread_point),
            total_point=parse_point(total_point),
            books=parse_books(books),
            line=line,
        )
        result = await fetcher.fetch_odds_and_normalize(request)
    except Exception as e:
        log.exception("odds_endpoint_failed", error=str(e))
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=str(e) or type(e).__name__).model_dump(),
        )

    log.info(
        "odds_lookup_completed",
        sport_key=sport_key,
        market=result.market,
        status=result.status.value,
        books_scanned=len(result.books_scanned),
    )
    return OddsResponse(result=result.to_result())
