"""Web adapter for the rsaid validation service."""

from .api import app, create_app

__all__ = [
    "app",
    "create_app",
]
