"""
Session Use Cases

Issue, resolve and revoke session cookie tokens.
"""

from .create_session_use_case import CreateSessionUseCase
from .lookup_session_use_case import LookupSessionUseCase
from .delete_session_use_case import DeleteSessionUseCase
from .dtos import CreatedSession

__all__ = [
    # Use Cases
    "CreateSessionUseCase",
    "LookupSessionUseCase",
    "DeleteSessionUseCase",
    # DTOs
    "CreatedSession",
]
