"""
Session Entity

Stores the hash of a user's session cookie token.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class Session(SQLModel, table=True):
    """
    Session entity - one signed-in browser per user.

    Business Rules:
    - Only the SHA-256 hash of the cookie token is stored
    - At most one row per user: a new sign-in overwrites the hash
    - Deleted on sign-out
    """

    __tablename__ = "sessions"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(foreign_key="users.id", unique=True, nullable=False)
    token_hash: str = Field(unique=True, index=True, max_length=64)
