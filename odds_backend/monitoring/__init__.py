"""Monitoring module for structured logging.

Provides structlog configuration shared by the API server, the CLI and tests:
- Structured JSON logging for production
- Human-readable console output for development
- Request IDs for tracing a lookup across the fetcher and the odds client
"""

from odds_backend.monitoring.logging import (
    configure_logging,
    get_logger,
    bind_request_id,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_request_id",
]
