"""
Change Email Use Case

Moves an account to a new email address.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User

logger = logging.getLogger(__name__)


class ChangeEmailUseCase:
    """
    Use case for changing the signed-in user's email.

    Business Rules:
    - Email is stored lowercased
    - Email must not belong to another account
    - The caller issues a fresh session afterwards
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, email: str) -> Result[User]:
        """
        Execute change email use case.

        Errors:
            - VALIDATION_ERROR: empty email
            - NOT_FOUND: user does not exist
            - EMAIL_TAKEN: another account uses the address
            - STORAGE_ERROR: update failed
        """
        email = email.strip().lower()
        if not email:
            return Return.err(Error("VALIDATION_ERROR", "Email must not be empty"))

        async with self.uow:
            try:
                user = await self.uow.users.get_by_id(user_id)
                if user is None:
                    return Return.err(Error("NOT_FOUND", "User not found"))

                owner = await self.uow.users.get_by_email(email)
                if owner is not None and owner.id != user.id:
                    return Return.err(
                        Error("EMAIL_TAKEN", "Email address is already in use")
                    )

                user.email = email
                user = await self.uow.users.update(user)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(Error("EMAIL_TAKEN", "Email address is already in use"))
            except SQLAlchemyError as exc:
                logger.error("Failed to change email for user %s: %s", user_id, type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"change email: {type(exc).__name__}"))

        logger.info("Email changed for user %s", user_id)
        return Return.ok(user)
