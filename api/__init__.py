"""
Hire My Hub API package.

Provides the FastAPI application for the Hire My Hub job board.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
