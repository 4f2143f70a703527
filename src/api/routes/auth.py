from datetime import timedelta
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.utils.session_cookie import (
    clear_session_cookie,
    read_session_cookie,
    set_session_cookie,
)
from src.app.services.email_service import IEmailService
from src.app.services.token_manager import TokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ForgotPasswordResponse,
    SigninUseCase,
    SignupCommand,
    SignupUseCase,
    UserInfo,
)
from src.app.use_cases.password_resets import (
    ConsumePasswordResetUseCase,
    CreatePasswordResetUseCase,
)
from src.app.use_cases.sessions import CreateSessionUseCase, DeleteSessionUseCase
from src.app.use_cases.users import UpdatePasswordUseCase
from src.depends import (
    get_email_service,
    get_password_reset_duration,
    get_token_manager,
    get_unit_of_work,
)

router = APIRouter(tags=["Authentication"])


async def start_session(
    response: Response, uow: UnitOfWork, token_manager: TokenManager, user_id: int
) -> None:
    """Issue a session for ``user_id`` and hand its token to the browser."""
    result = await CreateSessionUseCase(uow, token_manager).execute(user_id)
    if result.is_err():
        raise ServerError(result.error)
    set_session_cookie(response, result.value.token)


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")


@router.post("/users", status_code=status.HTTP_201_CREATED, response_model=UserInfo)
async def signup(
    request: SignupRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_manager: TokenManager = Depends(get_token_manager),
):
    """
    User Signup

    Creates an account and signs the new user in.

    Raises:
        - 409 Conflict: Email already in use
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(email=request.email, password=request.password)

    result = await SignupUseCase(uow).execute(command)
    if result.is_err():
        error = result.error
        if error.code == "EMAIL_TAKEN":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    user = result.value
    await start_session(response, uow, token_manager, user.id)
    return UserInfo(id=user.id, email=user.email)


class SigninRequest(BaseModel):
    """Sign-in HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/signin", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def signin(
    request: SigninRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_manager: TokenManager = Depends(get_token_manager),
):
    """
    User Sign In

    Checks credentials and replaces the user's session.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    result = await SigninUseCase(uow).execute(request.email, request.password)
    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    user = result.value
    await start_session(response, uow, token_manager, user.id)
    return UserInfo(id=user.id, email=user.email)


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
async def signout(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_manager: TokenManager = Depends(get_token_manager),
):
    """
    User Sign Out

    Deletes the session behind the cookie (if any) and clears the cookie.
    """
    token = read_session_cookie(request)
    if token:
        result = await DeleteSessionUseCase(uow, token_manager).execute(token)
        if result.is_err():
            raise ServerError(result.error)

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_session_cookie(response)
    return response


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")


@router.post(
    "/forgot-pw", status_code=status.HTTP_200_OK, response_model=ForgotPasswordResponse
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_manager: TokenManager = Depends(get_token_manager),
    duration: timedelta = Depends(get_password_reset_duration),
    email_service: IEmailService = Depends(get_email_service),
):
    """
    Request Password Reset

    Issues a reset token and emails a link carrying it. The token itself is
    never part of the response: the user must prove access to the mailbox.

    Raises:
        - 404 Not Found: No account uses this email
        - 500 Internal Server Error: Server error
    """
    use_case = CreatePasswordResetUseCase(uow, token_manager, duration=duration)
    result = await use_case.execute(request.email)
    if result.is_err():
        error = result.error
        if error.code == "USER_DOES_NOT_EXIST":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    reset_url = f"{ApplicationConfig.PASSWORD_RESET_URL}?{urlencode({'token': result.value.token})}"
    await email_service.send_password_reset(request.email, reset_url)

    return ForgotPasswordResponse(
        status="sent",
        message="Check your email for a link to reset your password",
    )


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    token: str = Field(..., description="Password reset token from email")
    password: str = Field(..., min_length=8, description="New password (min 8 chars)")


@router.post("/reset-pw", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def reset_password(
    request: ResetPasswordRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_manager: TokenManager = Depends(get_token_manager),
):
    """
    Confirm Password Reset

    Burns the reset token, stores the new password and signs the user in.

    Raises:
        - 400 Bad Request: Unknown or already used token
        - 410 Gone: Expired token; request a new reset
        - 500 Internal Server Error: Server error
    """
    result = await ConsumePasswordResetUseCase(uow, token_manager).execute(request.token)
    if result.is_err():
        error = result.error
        if error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "TOKEN_EXPIRED":
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        raise ServerError(error)

    user = result.value
    update_result = await UpdatePasswordUseCase(uow).execute(user.id, request.password)
    if update_result.is_err():
        raise ServerError(update_result.error)

    await start_session(response, uow, token_manager, user.id)
    return UserInfo(id=user.id, email=user.email)
