"""
Unit tests for SigninUseCase
"""
from unittest.mock import patch

import pytest

from src.app.services.passwords import hash_password
from src.app.use_cases.auth import SigninUseCase
from src.domain.entities import User


@pytest.fixture
def user():
    return User(id=7, email="user@example.com", password_hash=hash_password("SecurePass123"))


@pytest.mark.asyncio
async def test_signin_with_valid_credentials(mock_uow, user):
    mock_uow.users.get_by_email.return_value = user

    result = await SigninUseCase(mock_uow).execute(" USER@example.com", "SecurePass123")

    assert result.is_ok()
    assert result.value is user
    mock_uow.users.get_by_email.assert_called_once_with("user@example.com")


@pytest.mark.asyncio
async def test_signin_with_wrong_password(mock_uow, user):
    mock_uow.users.get_by_email.return_value = user

    result = await SigninUseCase(mock_uow).execute("user@example.com", "WrongPass123")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_signin_unknown_email_fails_like_wrong_password(mock_uow):
    with patch("src.app.use_cases.auth.signin_use_case.burn_password_check") as burn:
        result = await SigninUseCase(mock_uow).execute("nobody@example.com", "SecurePass123")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"
    burn.assert_called_once_with("SecurePass123")
