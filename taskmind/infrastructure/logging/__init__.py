"""Logging setup and structured step logging."""
