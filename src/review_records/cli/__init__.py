"""Command-line interface for review records."""

from .app import app

__all__ = ["app"]
