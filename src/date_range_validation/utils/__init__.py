"""Shared utilities: day-granularity date primitives and structured logging."""
