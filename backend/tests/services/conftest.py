"""Service test fixtures — async DB, seeded users/tokens, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions (one per request)
    - db_manager patched so the readiness check sees the test engine
    - Seeded tokens: alice/bob/admin active, one expired, one signed out

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Users seeded through the ORM (sign-up/sign-in are not part of this API)
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import uuid

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from quora.core.domain_types import AuthenticatedUser, UserId, UserRole
from quora.db.base import Base
from quora.infrastructure.database import get_db, DatabaseSessionManager
import quora.infrastructure.database as db_module
import quora.models  # noqa: F401
from quora.models.user import User
from quora.models.user_auth import UserAuth
from quora.main import app
from quora.services.question_service import QuestionService
from quora.services.question_store import SqlQuestionStore
from quora.services.user_store import SqlUserStore


@dataclass
class SeededUser:
    user: User
    token: str

    @property
    def identity(self) -> AuthenticatedUser:
        return AuthenticatedUser(
            id=UserId(self.user.uuid),
            username=self.user.username,
            role=self.user.role,
        )

    @property
    def headers(self) -> dict:
        return {"authorization": f"Bearer {self.token}"}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


def _make_user(username: str, role: str = UserRole.NONADMIN.value) -> User:
    return User(
        uuid=str(uuid.uuid4()),
        username=username,
        email=f"{username}@example.com",
        role=role,
    )


def _make_token(
    user: User,
    token: str,
    expires_in: timedelta = timedelta(hours=8),
    logged_out: bool = False,
) -> UserAuth:
    now = datetime.now(timezone.utc)
    return UserAuth(
        uuid=str(uuid.uuid4()),
        user_id=user.id,
        access_token=token,
        login_at=now,
        expires_at=now + expires_in,
        logout_at=now if logged_out else None,
    )


@pytest.fixture
async def users(test_db) -> dict[str, SeededUser]:
    """alice, bob (nonadmin), admin (role spelled "Admin"), plus dead tokens for alice/bob."""
    alice = _make_user("alice")
    bob = _make_user("bob")
    admin = _make_user("root", role="Admin")
    test_db.add_all([alice, bob, admin])
    await test_db.flush()

    test_db.add_all([
        _make_token(alice, "alice-token"),
        _make_token(bob, "bob-token"),
        _make_token(admin, "admin-token"),
        _make_token(alice, "expired-token", expires_in=timedelta(hours=-1)),
        _make_token(bob, "signed-out-token", logged_out=True),
    ])
    await test_db.commit()

    return {
        "alice": SeededUser(alice, "alice-token"),
        "bob": SeededUser(bob, "bob-token"),
        "admin": SeededUser(admin, "admin-token"),
    }


@pytest.fixture
def question_service(test_db) -> QuestionService:
    return QuestionService(SqlQuestionStore(test_db), SqlUserStore(test_db))


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = DatabaseSessionManager.from_engine(test_engine)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
