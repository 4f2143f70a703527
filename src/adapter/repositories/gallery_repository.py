from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.gallery_repository import IGalleryRepository
from src.domain.entities import Gallery


class GalleryRepository(IGalleryRepository):
    """Gallery repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, gallery: Gallery) -> Gallery:
        """Create a new gallery"""
        self.session.add(gallery)
        await self.session.flush()
        await self.session.refresh(gallery)
        return gallery

    async def get_by_id(self, gallery_id: int) -> Optional[Gallery]:
        """Get gallery by ID"""
        stmt = select(Gallery).where(Gallery.id == gallery_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_id(self, user_id: int) -> List[Gallery]:
        """Get all galleries owned by a user, oldest first"""
        stmt = select(Gallery).where(Gallery.user_id == user_id).order_by(Gallery.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def update(self, gallery: Gallery) -> Gallery:
        """Update existing gallery"""
        self.session.add(gallery)
        await self.session.flush()
        await self.session.refresh(gallery)
        return gallery

    async def delete_by_id(self, gallery_id: int) -> int:
        """Delete a gallery by ID"""
        stmt = delete(Gallery).where(Gallery.id == gallery_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
