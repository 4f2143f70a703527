import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import GalleryResponse

logger = logging.getLogger(__name__)


class GetGalleryUseCase:
    """Use case for reading one gallery. Galleries are public to read."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, gallery_id: int) -> Result[GalleryResponse]:
        if gallery_id < 0:
            return Return.err(
                Error("VALIDATION_ERROR", f"id must be a positive number, got {gallery_id}")
            )

        async with self.uow:
            try:
                gallery = await self.uow.galleries.get_by_id(gallery_id)
            except SQLAlchemyError as exc:
                logger.error("Failed to query gallery %s: %s", gallery_id, type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"query gallery by id: {type(exc).__name__}"))

        if gallery is None:
            return Return.err(Error("NOT_FOUND", "Gallery not found"))

        return Return.ok(
            GalleryResponse(id=gallery.id, user_id=gallery.user_id, title=gallery.title)
        )
