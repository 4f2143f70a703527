"""
SnapFolio Domain Entities

Each entity lives in its own file.
"""

from .user import User
from .session import Session
from .password_reset import PasswordReset
from .gallery import Gallery

__all__ = [
    "User",
    "Session",
    "PasswordReset",
    "Gallery",
]
