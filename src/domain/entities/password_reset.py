"""
PasswordReset Entity

Single-use, time-limited password reset tokens.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class PasswordReset(SQLModel, table=True):
    """
    PasswordReset entity - outstanding reset request for a user.

    Business Rules:
    - Token is stored as its SHA-256 hash only
    - At most one outstanding reset per user (a new request replaces it)
    - Deleted when consumed; expired rows linger until replaced or purged
    """

    __tablename__ = "password_resets"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(foreign_key="users.id", unique=True, nullable=False)
    token_hash: str = Field(unique=True, index=True, max_length=64)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False, index=True))
