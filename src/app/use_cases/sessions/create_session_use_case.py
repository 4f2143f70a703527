"""
Create Session Use Case

Signs a user in by issuing a new session token.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.token_manager import TokenManager
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CreatedSession

logger = logging.getLogger(__name__)


class CreateSessionUseCase:
    """
    Use case for issuing a session token.

    Business Rules:
    - One session per user: the new hash overwrites the previous one, so any
      older cookie stops working
    - Only the token hash is persisted
    - The raw token is returned exactly once, for the session cookie
    """

    def __init__(self, uow: UnitOfWork, token_manager: Optional[TokenManager] = None):
        self.uow = uow
        self.token_manager = token_manager or TokenManager()

    async def execute(self, user_id: int) -> Result[CreatedSession]:
        """
        Execute create session use case.

        Args:
            user_id: ID of the user who just proved their identity

        Returns:
            Result with CreatedSession (raw token included), or Error

        Errors:
            - VALIDATION_ERROR: user_id is negative
            - STORAGE_ERROR: the session row could not be written
        """
        if user_id < 0:
            return Return.err(
                Error("VALIDATION_ERROR", f"user_id must be a positive number, got {user_id}")
            )

        token, token_hash = self.token_manager.new()

        async with self.uow:
            try:
                session = await self.uow.sessions.upsert_for_user(user_id, token_hash)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error("Failed to create session for user %s: %s", user_id, type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"create session: {type(exc).__name__}"))

        logger.info("Session issued for user %s", user_id)
        return Return.ok(
            CreatedSession(
                id=session.id,
                user_id=user_id,
                token=token,
                token_hash=token_hash,
            )
        )
