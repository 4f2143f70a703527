"""
Session Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel


class CreatedSession(BaseModel):
    """
    A freshly issued session.

    ``token`` is the raw cookie value. This is the only place it ever
    exists; the database keeps ``token_hash`` alone.
    """

    id: int
    user_id: int
    token: str
    token_hash: str
