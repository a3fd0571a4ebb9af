"""HTTP API for best-price odds lookups."""
