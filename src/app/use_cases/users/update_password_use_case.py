"""
Update Password Use Case

Stores a new password for a user, e.g. after a consumed reset token.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.passwords import hash_password, validate_password
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class UpdatePasswordUseCase:
    """
    Use case for replacing a user's password hash.

    Business Rules:
    - New password must be at least 8 characters
    - Password is hashed with bcrypt (cost factor 12)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, password: str) -> Result[None]:
        """
        Execute update password use case.

        Errors:
            - VALIDATION_ERROR: password too short or negative user_id
            - NOT_FOUND: user does not exist
            - STORAGE_ERROR: update failed
        """
        if user_id < 0:
            return Return.err(
                Error("VALIDATION_ERROR", f"user_id must be a positive number, got {user_id}")
            )
        password_validation = validate_password(password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            try:
                user = await self.uow.users.get_by_id(user_id)
                if user is None:
                    return Return.err(Error("NOT_FOUND", "User not found"))

                user.password_hash = hash_password(password)
                await self.uow.users.update(user)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error("Failed to update password for user %s: %s", user_id, type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"update password: {type(exc).__name__}"))

        logger.info("Password updated for user %s", user_id)
        return Return.ok(None)
