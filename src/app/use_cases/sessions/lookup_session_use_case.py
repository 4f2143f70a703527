"""
Lookup Session Use Case

Resolves a session cookie back to its user.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.token_manager import TokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User

logger = logging.getLogger(__name__)


class LookupSessionUseCase:
    """
    Use case for authenticating a request from its session token.

    Business Rules:
    - The token is hashed and matched against stored hashes
    - Empty, malformed, revoked and never-issued tokens all fail the same
      way (NOT_FOUND) so callers cannot tell them apart
    """

    def __init__(self, uow: UnitOfWork, token_manager: Optional[TokenManager] = None):
        self.uow = uow
        self.token_manager = token_manager or TokenManager()

    async def execute(self, token: str) -> Result[User]:
        """
        Execute lookup session use case.

        Args:
            token: Raw session token from the cookie

        Returns:
            Result with the owning User, or Error

        Errors:
            - NOT_FOUND: no session matches; treat as unauthenticated
            - STORAGE_ERROR: the lookup query failed
        """
        if not token:
            return Return.err(Error("NOT_FOUND", "Session not found"))

        token_hash = self.token_manager.hash(token)

        async with self.uow:
            try:
                user = await self.uow.sessions.get_user_by_token_hash(token_hash)
            except SQLAlchemyError as exc:
                logger.error("Failed to look up session: %s", type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"lookup session: {type(exc).__name__}"))

        if user is None:
            return Return.err(Error("NOT_FOUND", "Session not found"))

        return Return.ok(user)
