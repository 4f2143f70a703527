"""
Unit tests for gallery CRUD use cases
"""
import pytest

from src.app.use_cases.galleries import (
    CreateGalleryUseCase,
    DeleteGalleryUseCase,
    GetGalleryUseCase,
    ListGalleriesUseCase,
    UpdateGalleryUseCase,
)
from src.domain.entities import Gallery


async def echo_save(gallery):
    if gallery.id is None:
        gallery.id = 5
    return gallery


@pytest.fixture
def gallery():
    return Gallery(id=5, user_id=7, title="Holiday")


@pytest.mark.asyncio
async def test_create_gallery_trims_title(mock_uow):
    mock_uow.galleries.create.side_effect = echo_save

    result = await CreateGalleryUseCase(mock_uow).execute(7, "  Holiday  ")

    assert result.is_ok()
    assert result.value.id == 5
    assert result.value.user_id == 7
    assert result.value.title == "Holiday"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_gallery_rejects_blank_title(mock_uow):
    result = await CreateGalleryUseCase(mock_uow).execute(7, "   ")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.galleries.create.assert_not_called()


@pytest.mark.asyncio
async def test_get_gallery(mock_uow, gallery):
    mock_uow.galleries.get_by_id.return_value = gallery

    result = await GetGalleryUseCase(mock_uow).execute(5)

    assert result.is_ok()
    assert result.value.title == "Holiday"


@pytest.mark.asyncio
async def test_get_gallery_missing(mock_uow):
    result = await GetGalleryUseCase(mock_uow).execute(5)

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_get_gallery_negative_id(mock_uow):
    result = await GetGalleryUseCase(mock_uow).execute(-5)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_list_galleries(mock_uow, gallery):
    mock_uow.galleries.get_by_user_id.return_value = [
        gallery,
        Gallery(id=6, user_id=7, title="Birthday"),
    ]

    result = await ListGalleriesUseCase(mock_uow).execute(7)

    assert result.is_ok()
    assert [g.title for g in result.value.galleries] == ["Holiday", "Birthday"]
    mock_uow.galleries.get_by_user_id.assert_called_once_with(7)


@pytest.mark.asyncio
async def test_update_gallery_by_owner(mock_uow, gallery):
    mock_uow.galleries.get_by_id.return_value = gallery
    mock_uow.galleries.update.side_effect = echo_save

    result = await UpdateGalleryUseCase(mock_uow).execute(5, 7, "Summer")

    assert result.is_ok()
    assert result.value.title == "Summer"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_gallery_by_other_user_is_forbidden(mock_uow, gallery):
    mock_uow.galleries.get_by_id.return_value = gallery

    result = await UpdateGalleryUseCase(mock_uow).execute(5, 8, "Mine now")

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.galleries.update.assert_not_called()


@pytest.mark.asyncio
async def test_delete_gallery_by_owner(mock_uow, gallery):
    mock_uow.galleries.get_by_id.return_value = gallery

    result = await DeleteGalleryUseCase(mock_uow).execute(5, 7)

    assert result.is_ok()
    mock_uow.galleries.delete_by_id.assert_called_once_with(5)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_gallery_by_other_user_is_forbidden(mock_uow, gallery):
    mock_uow.galleries.get_by_id.return_value = gallery

    result = await DeleteGalleryUseCase(mock_uow).execute(5, 8)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.galleries.delete_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_delete_gallery_missing(mock_uow):
    result = await DeleteGalleryUseCase(mock_uow).execute(5, 7)

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
