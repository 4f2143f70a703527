"""
Authentication Use Cases

Account creation and credential checks.
"""

from .signup_use_case import SignupUseCase
from .signin_use_case import SigninUseCase
from .dtos import ForgotPasswordResponse, SignupCommand, UserInfo

__all__ = [
    # Use Cases
    "SignupUseCase",
    "SigninUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "UserInfo",
    "ForgotPasswordResponse",
]
