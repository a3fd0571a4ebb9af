"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from odds_backend import __version__
from odds_backend.api.schemas import HealthResponse, ServiceResponse

SERVICE_NAME = "odds-backend is live"

router = APIRouter(tags=["health"])


@router.get("/", response_model=ServiceResponse)
async def root():
    """Liveness check used by the hosting platform."""
    return ServiceResponse(service=SERVICE_NAME)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Report service version and current time."""
    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
