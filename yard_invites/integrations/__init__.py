"""
Web framework integrations.
"""

from .fastapi import CORS_HEADERS, create_app, get_notifier

__all__ = ["CORS_HEADERS", "create_app", "get_notifier"]
