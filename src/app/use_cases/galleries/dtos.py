"""
Gallery Use Case DTOs (Data Transfer Objects)
"""

from typing import List

from pydantic import BaseModel


class GalleryResponse(BaseModel):
    """A single gallery"""

    id: int
    user_id: int
    title: str


class GalleryListResponse(BaseModel):
    """Galleries owned by one user"""

    galleries: List[GalleryResponse]
