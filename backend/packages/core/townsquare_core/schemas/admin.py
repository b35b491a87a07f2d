"""
Admin schemas.

Request and response models for administrator sessions.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class AdminLoginRequest(BaseModel):
    """Admin login request."""

    password: str = Field(min_length=1)


class AdminLoginResponse(BaseModel):
    """Issued admin bearer token."""

    token: str
    token_type: str = "bearer"
    expires_at: datetime
