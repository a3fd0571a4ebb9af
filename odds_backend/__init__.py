"""Best-price odds lookup backend for The Odds API."""

__version__ = "0.1.0"
