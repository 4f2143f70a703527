from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.api.routes.auth import start_session
from src.app.services.token_manager import TokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import UserInfo
from src.app.use_cases.users import ChangeEmailUseCase
from src.depends import get_current_user, get_token_manager, get_unit_of_work
from src.domain.entities import User

router = APIRouter(prefix="/users/me", tags=["User"])


@router.get("", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_me(current_user: User = Depends(get_current_user)):
    """
    Current User

    Raises:
        - 401 Unauthorized: Missing or unknown session cookie
    """
    return UserInfo(id=current_user.id, email=current_user.email)


class ChangeEmailRequest(BaseModel):
    """Change email HTTP request payload"""

    email: EmailStr = Field(..., description="New email address")


@router.post("/email", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def change_email(
    request: ChangeEmailRequest,
    response: Response,
    current_user: User = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_manager: TokenManager = Depends(get_token_manager),
):
    """
    Change Email

    Moves the account to a new address and re-issues the session.

    Raises:
        - 401 Unauthorized: Not signed in
        - 409 Conflict: Email already in use
        - 500 Internal Server Error: Server error
    """
    result = await ChangeEmailUseCase(uow).execute(current_user.id, request.email)
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
