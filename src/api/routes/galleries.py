from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.galleries import (
    CreateGalleryUseCase,
    DeleteGalleryUseCase,
    GalleryListResponse,
    GalleryResponse,
    GetGalleryUseCase,
    ListGalleriesUseCase,
    UpdateGalleryUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import User
from src.libs.result import Error

router = APIRouter(prefix="/galleries", tags=["Galleries"])

ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error) -> None:
    if error.code in ERROR_STATUS:
        raise ClientError(error, status_code=ERROR_STATUS[error.code])
    raise ServerError(error)


class GalleryRequest(BaseModel):
    """Create/update gallery HTTP request payload"""

    title: str = Field(..., min_length=1, max_length=255, description="Gallery title")


@router.get("", status_code=status.HTTP_200_OK, response_model=GalleryListResponse)
async def list_galleries(
    current_user: User = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the signed-in user's galleries"""
    result = await ListGalleriesUseCase(uow).execute(current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=GalleryResponse)
async def create_gallery(
    request: GalleryRequest,
    current_user: User = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Gallery

    Raises:
        - 400 Bad Request: Empty title
        - 401 Unauthorized: Not signed in
    """
    result = await CreateGalleryUseCase(uow).execute(current_user.id, request.title)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{gallery_id}", status_code=status.HTTP_200_OK, response_model=GalleryResponse)
async def get_gallery(gallery_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Show Gallery

    Public: anyone with the id can view a gallery.

    Raises:
        - 404 Not Found: No such gallery
    """
    result = await GetGalleryUseCase(uow).execute(gallery_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{gallery_id}", status_code=status.HTTP_200_OK, response_model=GalleryResponse)
async def update_gallery(
    gallery_id: int,
    request: GalleryRequest,
    current_user: User = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Gallery

    Raises:
        - 403 Forbidden: Gallery belongs to another user
        - 404 Not Found: No such gallery
    """
    result = await UpdateGalleryUseCase(uow).execute(
        gallery_id, current_user.id, request.title
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{gallery_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_gallery(
    gallery_id: int,
    current_user: User = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Gallery

    Raises:
        - 403 Forbidden: Gallery belongs to another user
        - 404 Not Found: No such gallery
    """
    result = await DeleteGalleryUseCase(uow).execute(gallery_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
