"""
Purge Expired Password Resets Use Case

Deletes reset rows nobody can redeem any more.
"""

import logging
from datetime import datetime
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from .dtos import PurgeExpiredPasswordResetsResponse

logger = logging.getLogger(__name__)


class PurgeExpiredPasswordResetsUseCase:
    """
    Admin-triggered cleanup. Expired rows are otherwise only reclaimed when
    the same user requests another reset.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[PurgeExpiredPasswordResetsResponse]:
        async with self.uow:
            try:
                purged = await self.uow.password_resets.delete_expired(self.clock())
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error("Failed to purge expired password resets: %s", type(exc).__name__)
                return Return.err(
                    Error("STORAGE_ERROR", f"purge expired password resets: {type(exc).__name__}")
                )

        logger.info("Purged %d expired password resets", purged)
        return Return.ok(
            PurgeExpiredPasswordResetsResponse(status="purged", purged=purged)
        )
