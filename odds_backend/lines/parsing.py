"""Loose input parsing shared by the HTTP query, the CLI and upstream payloads."""

import math
from typing import Any


def parse_point(value: Any) -> float | None:
    """Finite number from user or upstream input; blank or non-numeric is None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        point = float(value)
    except (TypeError, ValueError):
        return None
    return point if math.isfinite(point) else None


def parse_books(value: str | None) -> tuple[str, ...]:
    """Comma-separated bookmaker keys, trimmed, in order, without repeats."""
    if not value:
        return ()
    books = (b.strip() for b in value.split(","))
    return tuple(dict.fromkeys(b for b in books if b))
