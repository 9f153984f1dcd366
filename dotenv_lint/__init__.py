"""Lint .env files for formatting problems."""

__version__ = "0.1.0"
