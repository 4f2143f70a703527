"""
Admin API Routes - Maintenance Endpoints

Authentication is via Admin API Key, not session cookies.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.password_resets import (
    PurgeExpiredPasswordResetsResponse,
    PurgeExpiredPasswordResetsUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/password-resets/purge",
    status_code=status.HTTP_200_OK,
    response_model=PurgeExpiredPasswordResetsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_expired_password_resets(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purge Expired Password Resets

    Deletes reset rows past their expiry. Outstanding, unexpired resets are
    untouched.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    result = await PurgeExpiredPasswordResetsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value
