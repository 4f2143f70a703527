"""
User Entity

Account owner of sessions, password resets and galleries.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """
    User entity - an account that can sign in.

    Business Rules:
    - Email is stored lowercased and must be unique
    - Password stored as bcrypt hash (cost factor 12)
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
