"""Structured logging configuration using structlog.

- JSON output in production mode
- Colored console output in development mode
- Request IDs bound through contextvars for tracing a lookup end to end

Usage:
    from odds_backend.monitoring import configure_logging, get_logger

    configure_logging("production")  # or "development"

    log = get_logger()
    log.info("odds_api_request_completed", event_count=5, duration_ms=120)
    log.warning("odds_fetch_failed", error="GET ... -> 503")
"""

import logging
import sys

import structlog


def configure_logging(mode: str = "development", level: int = logging.INFO) -> None:
    """Configure structlog for the application.

    Args:
        mode: "production" for JSON output, anything else for colored console
        level: Minimum stdlib level that reaches the output
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if mode == "production":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module name)
    """
    return structlog.get_logger(name)


def bind_request_id(request_id: str) -> None:
    """Bind a request ID to the current context.

    All subsequent log events in this context include the request_id field.
    """
    structlog.contextvars.bind_contextvars(request_id=request_id)
