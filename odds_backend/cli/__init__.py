"""Command-line interface for odds lookups."""
