"""
API router modules.

This package contains all API route handlers organized by domain.
"""

from . import admin, events, languages, posts

__all__ = [
    "posts",
    "events",
    "languages",
    "admin",
]
