from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Gallery


class IGalleryRepository(ABC):
    """Gallery repository interface - application layer"""

    @abstractmethod
    async def create(self, gallery: Gallery) -> Gallery:
        """Create a new gallery"""
        pass

    @abstractmethod
    async def get_by_id(self, gallery_id: int) -> Optional[Gallery]:
        """Get gallery by ID"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> List[Gallery]:
        """Get all galleries owned by a user"""
        pass

    @abstractmethod
    async def update(self, gallery: Gallery) -> Gallery:
        """Update existing gallery"""
        pass

    @abstractmethod
    async def delete_by_id(self, gallery_id: int) -> int:
        """Delete a gallery by ID. Returns count of deleted rows."""
        pass
