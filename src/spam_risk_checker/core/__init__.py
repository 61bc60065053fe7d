"""Core helpers: errors and logging."""
