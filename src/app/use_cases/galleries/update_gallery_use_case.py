import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import GalleryResponse

logger = logging.getLogger(__name__)


class UpdateGalleryUseCase:
    """
    Use case for renaming a gallery.

    Business Rules:
    - Title must not be empty
    - Only the owner may update
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, gallery_id: int, user_id: int, title: str
    ) -> Result[GalleryResponse]:
        if gallery_id < 0:
            return Return.err(
                Error("VALIDATION_ERROR", f"id must be a positive number, got {gallery_id}")
            )
        title = title.strip()
        if not title:
            return Return.err(Error("VALIDATION_ERROR", "Title must not be empty"))

        async with self.uow:
            try:
                gallery = await self.uow.galleries.get_by_id(gallery_id)
                if gallery is None:
                    return Return.err(Error("NOT_FOUND", "Gallery not found"))
                if gallery.user_id != user_id:
                    return Return.err(
                        Error("FORBIDDEN", "You do not have permission to edit this gallery")
                    )

                gallery.title = title
                gallery = await self.uow.galleries.update(gallery)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error("Failed to update gallery %s: %s", gallery_id, type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"update gallery: {type(exc).__name__}"))

        return Return.ok(
            GalleryResponse(id=gallery.id, user_id=gallery.user_id, title=gallery.title)
        )
