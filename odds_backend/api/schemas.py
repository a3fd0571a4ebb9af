"""Pydantic v2 response models for the API."""

from typing import Any

from pydantic import BaseModel


class ServiceResponse(BaseModel):
    ok: bool = True
    service: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    timestamp: str


class OddsResponse(BaseModel):
    """Best-price lookup result.

    `result` is empty when nothing could be determined; otherwise it carries
    Market, Book (absent for a caller-provided line), Odds, Decimal,
    "Implied %" and, for spreads/totals, Point.
    """

    ok: bool = True
    result: dict[str, Any]


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
