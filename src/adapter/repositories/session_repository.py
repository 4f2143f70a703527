from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.upsert import dialect_insert
from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Session, User


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: int) -> Optional[Session]:
        """Get the session row owned by a user"""
        stmt = (
            select(Session)
            .where(Session.user_id == user_id)
            # Upserts bypass the identity map, so reload stale instances
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def upsert_for_user(self, user_id: int, token_hash: str) -> Session:
        """
        Replace the user's session hash, inserting a row if there is none.

        INSERT ... ON CONFLICT (user_id) DO UPDATE, so concurrent sign-ins for
        the same user both succeed and the last write wins.
        """
        stmt = dialect_insert(self.session, Session.__table__).values(
            user_id=user_id, token_hash=token_hash
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"],
            set_={"token_hash": stmt.excluded.token_hash},
        ).returning(Session.__table__.c.id)
        result = await self.session.execute(stmt)
        session_id = result.scalar_one()
        await self.session.flush()
        return Session(id=session_id, user_id=user_id, token_hash=token_hash)

    async def get_user_by_token_hash(self, token_hash: str) -> Optional[User]:
        """Get the user owning the session with this token hash"""
        stmt = (
            select(User)
            .join(Session, Session.user_id == User.id)
            .where(Session.token_hash == token_hash)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete_by_token_hash(self, token_hash: str) -> int:
        """Delete the session with this token hash"""
        stmt = delete(Session).where(Session.token_hash == token_hash)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
