import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Gallery
from .dtos import GalleryResponse

logger = logging.getLogger(__name__)


class CreateGalleryUseCase:
    """
    Use case for creating a gallery.

    Business Rules:
    - Owner id must not be negative
    - Title must not be empty
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, title: str) -> Result[GalleryResponse]:
        if user_id < 0:
            return Return.err(
                Error("VALIDATION_ERROR", f"user_id must be a positive number, got {user_id}")
            )
        title = title.strip()
        if not title:
            return Return.err(Error("VALIDATION_ERROR", "Title must not be empty"))

        async with self.uow:
            try:
                gallery = await self.uow.galleries.create(Gallery(user_id=user_id, title=title))
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error("Failed to create gallery for user %s: %s", user_id, type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"create gallery: {type(exc).__name__}"))

        return Return.ok(
            GalleryResponse(id=gallery.id, user_id=gallery.user_id, title=gallery.title)
        )
