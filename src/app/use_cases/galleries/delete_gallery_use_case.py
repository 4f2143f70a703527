import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteGalleryUseCase:
    """Use case for deleting a gallery. Only the owner may delete."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, gallery_id: int, user_id: int) -> Result[None]:
        if gallery_id < 0:
            return Return.err(
                Error("VALIDATION_ERROR", f"id must be a positive number, got {gallery_id}")
            )

        async with self.uow:
            try:
                gallery = await self.uow.galleries.get_by_id(gallery_id)
                if gallery is None:
                    return Return.err(Error("NOT_FOUND", "Gallery not found"))
                if gallery.user_id != user_id:
                    return Return.err(
                        Error("FORBIDDEN", "You do not have permission to delete this gallery")
                    )

                await self.uow.galleries.delete_by_id(gallery_id)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error("Failed to delete gallery %s: %s", gallery_id, type(exc).__name__)
                return Return.err(Error("STORAGE_ERROR", f"delete gallery: {type(exc).__name__}"))

        logger.info("Gallery %s deleted by user %s", gallery_id, user_id)
        return Return.ok(None)
