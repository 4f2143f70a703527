from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Tuple

from src.domain.entities import PasswordReset, User


class IPasswordResetRepository(ABC):
    """PasswordReset repository interface - application layer"""

    @abstractmethod
    async def upsert_for_user(
        self, user_id: int, token_hash: str, expires_at: datetime
    ) -> PasswordReset:
        """Insert a reset for the user, replacing any outstanding one"""
        pass

    @abstractmethod
    async def get_with_user_by_token_hash(
        self, token_hash: str
    ) -> Optional[Tuple[PasswordReset, User]]:
        """Get a reset and its owning user by token hash"""
        pass

    @abstractmethod
    async def delete_by_id(self, reset_id: int) -> int:
        """Delete a reset by ID. Returns count of deleted rows."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete every reset that expired before ``now``. Returns count."""
        pass
