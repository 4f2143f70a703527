"""
Create Password Reset Use Case

Issues a single-use, time-limited reset token for a user's email.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.token_manager import TokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from .dtos import CreatedPasswordReset

logger = logging.getLogger(__name__)

DEFAULT_RESET_DURATION = timedelta(hours=1)


class CreatePasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Email is matched lowercased
    - Unknown email fails with USER_DOES_NOT_EXIST and writes nothing
    - Token expires ``duration`` after creation (default 1 hour)
    - One outstanding reset per user: a new request replaces the old hash,
      so previously emailed links stop working
    - Only the token hash is persisted
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_manager: Optional[TokenManager] = None,
        duration: Optional[timedelta] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.token_manager = token_manager or TokenManager()
        self.duration = duration or DEFAULT_RESET_DURATION
        self.clock = clock

    async def execute(self, email: str) -> Result[CreatedPasswordReset]:
        """
        Execute create password reset use case.

        Args:
            email: Email address typed into the forgot password form

        Returns:
            Result with CreatedPasswordReset (raw token included), or Error

        Errors:
            - USER_DOES_NOT_EXIST: no account uses this email
            - STORAGE_ERROR: lookup or upsert failed
        """
        email = email.strip().lower()

        async with self.uow:
            try:
                user = await self.uow.users.get_by_email(email)
                if user is None:
                    return Return.err(
                        Error(
                            "USER_DOES_NOT_EXIST",
                            "User with provided email address does not exist",
                        )
                    )

                token, token_hash = self.token_manager.new()
                expires_at = self.clock() + self.duration

                reset = await self.uow.password_resets.upsert_for_user(
                    user.id, token_hash, expires_at
                )
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error("Failed to create password reset: %s", type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"create password reset: {type(exc).__name__}"))

        logger.info("Password reset issued for user %s", user.id)
        return Return.ok(
            CreatedPasswordReset(
                id=reset.id,
                user_id=user.id,
                token=token,
                token_hash=token_hash,
                expires_at=expires_at,
            )
        )
