from datetime import timedelta

from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.libs.result import Error
from src.adapter.services.email_service import LogOnlyEmailService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, ServerError
from src.app.services.email_service import IEmailService
from src.app.services.token_manager import TokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sessions import LookupSessionUseCase
from src.domain.entities import User

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_manager() -> TokenManager:
    return TokenManager(ApplicationConfig.BYTES_PER_TOKEN)


def get_password_reset_duration() -> timedelta:
    return timedelta(seconds=ApplicationConfig.PASSWORD_RESET_DURATION_SECONDS)


def get_email_service() -> IEmailService:
    return LogOnlyEmailService()


async def get_current_user(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_manager: TokenManager = Depends(get_token_manager),
) -> User:
    """
    Dependency to resolve the session cookie to a signed-in user.

    Args:
        request: Incoming request carrying the session cookie

    Returns:
        The User owning the session

    Raises:
        ClientError: 401 if the cookie is missing or matches no session
        ServerError: if the session store is unavailable
    """
    token = request.cookies.get(ApplicationConfig.SESSION_COOKIE_NAME)
    if not token:
        raise ClientError(
            Error("UNAUTHENTICATED", "Sign in required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = await LookupSessionUseCase(uow, token_manager).execute(token)
    if result.is_err():
        error = result.error
        if error.code == "NOT_FOUND":
            raise ClientError(
                Error("UNAUTHENTICATED", "Sign in required"),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        raise ServerError(error)

    return result.value
