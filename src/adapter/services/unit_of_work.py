from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.gallery_repository import GalleryRepository
from src.adapter.repositories.password_reset_repository import PasswordResetRepository
from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.password_resets = PasswordResetRepository(self.session)
        self.galleries = GalleryRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        # Rolling back expires loaded entities, so only do it on failure
        if exc_type is not None:
            await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
