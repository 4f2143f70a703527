from urllib.parse import parse_qs, urlparse

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.app.services.email_service import IEmailService
from src.app.services.passwords import hash_password
from src.depends import get_email_service, get_unit_of_work
from src.domain.entities import User


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with Session() as session:
        yield session


@pytest.fixture
def app(db_session):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_user(db_session):
    """Insert a user with a known password and return it"""

    async def _make_user(email: str = "user@example.com", password: str = "SecurePass123"):
        user = User(email=email, password_hash=hash_password(password))
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return _make_user


class RecordingEmailService(IEmailService):
    """Keeps password reset emails in memory instead of sending them"""

    def __init__(self):
        self.sent = []

    async def send_password_reset(self, email: str, reset_url: str) -> None:
        self.sent.append((email, reset_url))

    def last_token(self) -> str:
        _, reset_url = self.sent[-1]
        return parse_qs(urlparse(reset_url).query)["token"][0]


@pytest.fixture
def outbox(app):
    outbox = RecordingEmailService()
    app.dependency_overrides[get_email_service] = lambda: outbox
    return outbox
