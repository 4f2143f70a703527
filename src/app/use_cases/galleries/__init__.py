"""
Gallery Use Cases

Per-user gallery CRUD.
"""

from .create_gallery_use_case import CreateGalleryUseCase
from .get_gallery_use_case import GetGalleryUseCase
from .list_galleries_use_case import ListGalleriesUseCase
from .update_gallery_use_case import UpdateGalleryUseCase
from .delete_gallery_use_case import DeleteGalleryUseCase
from .dtos import GalleryListResponse, GalleryResponse

__all__ = [
    # Use Cases
    "CreateGalleryUseCase",
    "GetGalleryUseCase",
    "ListGalleriesUseCase",
    "UpdateGalleryUseCase",
    "DeleteGalleryUseCase",
    # DTOs
    "GalleryResponse",
    "GalleryListResponse",
]
