"""
Password Reset Use Cases

Issue, redeem and purge password reset tokens.
"""

from .create_password_reset_use_case import (
    DEFAULT_RESET_DURATION,
    CreatePasswordResetUseCase,
)
from .consume_password_reset_use_case import ConsumePasswordResetUseCase
from .purge_expired_password_resets_use_case import PurgeExpiredPasswordResetsUseCase
from .dtos import CreatedPasswordReset, PurgeExpiredPasswordResetsResponse

__all__ = [
    # Use Cases
    "CreatePasswordResetUseCase",
    "ConsumePasswordResetUseCase",
    "PurgeExpiredPasswordResetsUseCase",
    # DTOs
    "CreatedPasswordReset",
    "PurgeExpiredPasswordResetsResponse",
    # Constants
    "DEFAULT_RESET_DURATION",
]
