import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import GalleryListResponse, GalleryResponse

logger = logging.getLogger(__name__)


class ListGalleriesUseCase:
    """Use case for listing the galleries a user owns."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[GalleryListResponse]:
        if user_id < 0:
            return Return.err(
                Error("VALIDATION_ERROR", f"user_id must be a positive number, got {user_id}")
            )

        async with self.uow:
            try:
                galleries = await self.uow.galleries.get_by_user_id(user_id)
            except SQLAlchemyError as exc:
                logger.error("Failed to query galleries for user %s: %s", user_id, type(exc).__name__)
                return Return.err(
                    Error("STORAGE_ERROR", f"query galleries by user id: {type(exc).__name__}")
                )

        return Return.ok(
            GalleryListResponse(
                galleries=[
                    GalleryResponse(id=g.id, user_id=g.user_id, title=g.title)
                    for g in galleries
                ]
            )
        )
