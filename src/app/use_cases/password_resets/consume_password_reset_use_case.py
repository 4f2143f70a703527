"""
Consume Password Reset Use Case

Validates a reset token and burns it.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.token_manager import TokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import User

logger = logging.getLogger(__name__)


class ConsumePasswordResetUseCase:
    """
    Use case for redeeming a password reset token.

    Business Rules:
    - Token is validated by hashing and comparing with the stored hash
    - Expired tokens fail with TOKEN_EXPIRED, distinct from NOT_FOUND, and
      their row is left in place
    - A valid token is deleted before the user is returned (single use)
    - Setting the new password and signing in is up to the caller
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_manager: Optional[TokenManager] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.token_manager = token_manager or TokenManager()
        self.clock = clock

    async def execute(self, token: str) -> Result[User]:
        """
        Execute consume password reset use case.

        Args:
            token: Raw reset token from the emailed link

        Returns:
            Result with the User the token belonged to, or Error

        Errors:
            - NOT_FOUND: token unknown or already consumed
            - TOKEN_EXPIRED: token is past its expiry
            - STORAGE_ERROR: lookup or delete failed
        """
        if not token:
            return Return.err(Error("NOT_FOUND", "Password reset not found"))

        token_hash = self.token_manager.hash(token)

        async with self.uow:
            try:
                row = await self.uow.password_resets.get_with_user_by_token_hash(token_hash)
                if row is None:
                    return Return.err(Error("NOT_FOUND", "Password reset not found"))

                reset, user = row
                if self.clock() > reset.expires_at:
                    logger.warning("Expired password reset presented for user %s", user.id)
                    return Return.err(
                        Error("TOKEN_EXPIRED", "Password reset token has expired")
                    )

                await self.uow.password_resets.delete_by_id(reset.id)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error("Failed to consume password reset: %s", type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"consume password reset: {type(exc).__name__}"))

        logger.info("Password reset consumed for user %s", user.id)
        return Return.ok(user)
