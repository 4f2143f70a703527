"""
Signin Use Case

Checks an email/password pair.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.passwords import burn_password_check, check_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User

logger = logging.getLogger(__name__)


class SigninUseCase:
    """
    Use case for verifying sign-in credentials.

    Business Rules:
    - Email is matched lowercased
    - Unknown email and wrong password fail identically
    - A bcrypt comparison runs even for unknown emails (timing)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[User]:
        """
        Execute signin use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with the authenticated User, or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            try:
                user = await self.uow.users.get_by_email(email.strip().lower())
            except SQLAlchemyError as exc:
                logger.error("Failed to look up user for sign in: %s", type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"authenticate: {type(exc).__name__}"))

        if user is None:
            burn_password_check(password)
            return Return.err(Error("INVALID_CREDENTIALS", "Invalid email or password"))

        if not check_password(password, user.password_hash):
            return Return.err(Error("INVALID_CREDENTIALS", "Invalid email or password"))

        return Return.ok(user)
