"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from odds_backend import __version__
from odds_backend.api.config import get_settings
from odds_backend.api.middleware import RequestLoggingMiddleware
from odds_backend.api.routers import health, odds
from odds_backend.monitoring import configure_logging, get_logger

log = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging from settings at startup."""
    settings = get_settings()
    configure_logging(settings.environment)
    log.info(
        "odds_backend_started",
        version=__version__,
        environment=settings.environment,
        odds_api_configured=settings.odds_api_config().is_configured,
        strict_markets=settings.strict_markets,
    )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Odds Backend",
        description="Best available price across sportsbooks via The Odds API",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router)
    app.include_router(odds.router)

    return app
