"""
Password Reset Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime

from pydantic import BaseModel


class CreatedPasswordReset(BaseModel):
    """
    A freshly issued password reset.

    ``token`` is the raw value for the reset link and is never stored.
    """

    id: int
    user_id: int
    token: str
    token_hash: str
    expires_at: datetime


class PurgeExpiredPasswordResetsResponse(BaseModel):
    """Response for purge expired password resets use case"""

    status: str
    purged: int
