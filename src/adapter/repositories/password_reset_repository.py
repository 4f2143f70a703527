from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.upsert import dialect_insert
from src.app.repositories.password_reset_repository import IPasswordResetRepository
from src.domain.entities import PasswordReset, User


class PasswordResetRepository(IPasswordResetRepository):
    """PasswordReset repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def upsert_for_user(
        self, user_id: int, token_hash: str, expires_at: datetime
    ) -> PasswordReset:
        """
        Insert a reset for the user, replacing any outstanding one.

        INSERT ... ON CONFLICT (user_id) DO UPDATE keeps a single row per user
        in one statement.
        """
        stmt = dialect_insert(self.session, PasswordReset.__table__).values(
            user_id=user_id, token_hash=token_hash, expires_at=expires_at
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"],
            set_={
                "token_hash": stmt.excluded.token_hash,
                "expires_at": stmt.excluded.expires_at,
            },
        ).returning(PasswordReset.__table__.c.id)
        result = await self.session.execute(stmt)
        reset_id = result.scalar_one()
        await self.session.flush()
        return PasswordReset(
            id=reset_id,
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at,
        )

    async def get_with_user_by_token_hash(
        self, token_hash: str
    ) -> Optional[Tuple[PasswordReset, User]]:
        """Get a reset and its owning user by token hash"""
        stmt = (
            select(PasswordReset, User)
            .join(User, User.id == PasswordReset.user_id)
            .where(PasswordReset.token_hash == token_hash)
            # Upserts bypass the identity map, so reload stale instances
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        reset, user = row
        return reset, user

    async def delete_by_id(self, reset_id: int) -> int:
        """Delete a reset by ID"""
        stmt = delete(PasswordReset).where(PasswordReset.id == reset_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        """Delete every reset that expired before ``now``"""
        stmt = delete(PasswordReset).where(PasswordReset.expires_at < now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
