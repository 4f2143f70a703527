"""
Delete Session Use Case

Signs a user out.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.token_manager import TokenManager
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteSessionUseCase:
    """
    Use case for revoking a session token.

    Business Rules:
    - Idempotent: deleting an unknown token succeeds
    """

    def __init__(self, uow: UnitOfWork, token_manager: Optional[TokenManager] = None):
        self.uow = uow
        self.token_manager = token_manager or TokenManager()

    async def execute(self, token: str) -> Result[None]:
        """
        Execute delete session use case.

        Args:
            token: Raw session token from the cookie

        Returns:
            Result with None, or Error

        Errors:
            - STORAGE_ERROR: the delete failed
        """
        if not token:
            return Return.ok(None)

        token_hash = self.token_manager.hash(token)

        async with self.uow:
            try:
                deleted = await self.uow.sessions.delete_by_token_hash(token_hash)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error("Failed to delete session: %s", type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"delete session: {type(exc).__name__}"))

        if deleted:
            logger.info("Session deleted")
        return Return.ok(None)
