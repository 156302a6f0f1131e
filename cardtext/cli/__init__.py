"""Command-line interface for cardtext."""

from .main import app, main

__all__ = ["app", "main"]
