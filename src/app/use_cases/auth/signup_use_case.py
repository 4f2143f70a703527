"""
Signup Use Case

Creates a new account from an email and password.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.passwords import hash_password, validate_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .dtos import SignupCommand

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[User] (the stored account)

    Business Logic:
    1. Validate password length
    2. Lowercase the email and check it is not taken
    3. Hash password with bcrypt cost factor 12
    4. Insert the user; a unique-constraint race also maps to EMAIL_TAKEN

    Signing the new user in is left to CreateSessionUseCase.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[User]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with email and password

        Returns:
            Result[User] with the created user
            or Error(EMAIL_TAKEN | VALIDATION_ERROR | STORAGE_ERROR)
        """
        password_validation = validate_password(command.password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        email = command.email.strip().lower()

        async with self.uow:
            try:
                existing_user = await self.uow.users.get_by_email(email)
                if existing_user:
                    return Return.err(
                        Error("EMAIL_TAKEN", "Email address is already in use")
                    )

                user = User(email=email, password_hash=hash_password(command.password))
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(Error("EMAIL_TAKEN", "Email address is already in use"))
            except SQLAlchemyError as exc:
                logger.error("Failed to create user: %s", type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"create user: {type(exc).__name__}"))

        logger.info("User %s signed up", user.id)
        return Return.ok(user)
