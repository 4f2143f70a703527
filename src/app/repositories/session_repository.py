from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Session, User


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> Optional[Session]:
        """Get the session row owned by a user"""
        pass

    @abstractmethod
    async def upsert_for_user(self, user_id: int, token_hash: str) -> Session:
        """Replace the user's session hash, inserting a row if there is none"""
        pass

    @abstractmethod
    async def get_user_by_token_hash(self, token_hash: str) -> Optional[User]:
        """Get the user owning the session with this token hash"""
        pass

    @abstractmethod
    async def delete_by_token_hash(self, token_hash: str) -> int:
        """Delete the session with this token hash. Returns count of deleted rows."""
        pass
