"""Command-line interface for date range validation."""
