"""
User Use Cases

Changes to an existing account.
"""

from .update_password_use_case import UpdatePasswordUseCase
from .change_email_use_case import ChangeEmailUseCase

__all__ = [
    "UpdatePasswordUseCase",
    "ChangeEmailUseCase",
]
