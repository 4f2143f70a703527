import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with every repository the use cases touch"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock()
    uow.users.update = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.get_by_user_id = AsyncMock(return_value=None)
    uow.sessions.upsert_for_user = AsyncMock()
    uow.sessions.get_user_by_token_hash = AsyncMock(return_value=None)
    uow.sessions.delete_by_token_hash = AsyncMock(return_value=0)

    uow.password_resets = MagicMock()
    uow.password_resets.upsert_for_user = AsyncMock()
    uow.password_resets.get_with_user_by_token_hash = AsyncMock(return_value=None)
    uow.password_resets.delete_by_id = AsyncMock(return_value=1)
    uow.password_resets.delete_expired = AsyncMock(return_value=0)

    uow.galleries = MagicMock()
    uow.galleries.create = AsyncMock()
    uow.galleries.get_by_id = AsyncMock(return_value=None)
    uow.galleries.get_by_user_id = AsyncMock(return_value=[])
    uow.galleries.update = AsyncMock()
    uow.galleries.delete_by_id = AsyncMock(return_value=1)

    return uow
