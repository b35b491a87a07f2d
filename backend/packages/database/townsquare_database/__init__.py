"""
Townsquare Database Package.

SQLAlchemy models, session management and migrations.
"""

from .models import Base

__all__ = ["Base"]
