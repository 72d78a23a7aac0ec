"""Pytest configuration and shared fixtures."""

import os


# Settings are read once at import time
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_CREATE_TABLES", "false")

from collections.abc import AsyncGenerator  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from foodstall.config import settings  # noqa: E402
from foodstall.core.auth import generate_session_id, hash_password  # noqa: E402
from foodstall.core.database import Base, get_db  # noqa: E402
from foodstall.core.permissions.models import Role  # noqa: E402
from foodstall.core.permissions.table import full_permissions  # noqa: E402
from foodstall.core.sessions import (  # noqa: E402
    SessionIdentity,
    SessionStore,
    get_session_store,
)
from foodstall.main import create_app  # noqa: E402
from foodstall.modules.users.models import User  # noqa: E402
from foodstall.seed import DEFAULT_ROLES  # noqa: E402
from tests.factories.users import TEST_PASSWORD  # noqa: E402


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class InMemorySessionStore(SessionStore):
    """Session store keeping identities in a dict."""

    def __init__(self) -> None:
        self.sessions: dict[str, SessionIdentity] = {}

    async def create(self, user_id: UUID) -> SessionIdentity:
        identity = SessionIdentity(
            session_id=generate_session_id(),
            user_id=user_id,
            created_at=datetime.now(UTC),
        )
        self.sessions[identity.session_id] = identity
        return identity

    async def get(self, session_id: str) -> SessionIdentity | None:
        return self.sessions.get(session_id)

    async def destroy(self, session_id: str) -> bool:
        return self.sessions.pop(session_id, None) is not None


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory SQLite engine with every table."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session shared by the test and the app."""
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def app(db: AsyncSession, session_store: InMemorySessionStore) -> FastAPI:
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_session_store] = lambda: session_store

    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Role and User Fixtures
# ============================================================


async def _create_role(
    db: AsyncSession, name: str, permissions: dict[str, list[str]]
) -> Role:
    role = Role(name=name, permissions=permissions)
    db.add(role)
    await db.flush()
    return role


async def _create_user(db: AsyncSession, email: str, role: Role | None) -> User:
    user = User(
        email=email,
        password_hash=hash_password(TEST_PASSWORD),
        role=role.id if role else None,
    )
    db.add(user)
    await db.flush()
    return user


@pytest.fixture
async def admin_role(db: AsyncSession) -> Role:
    """Role granting every action on every resource."""
    return await _create_role(db, "admin", full_permissions())


@pytest.fixture
async def cashier_role(db: AsyncSession) -> Role:
    """Role granting invoice handling and read access to the catalogue."""
    return await _create_role(db, "cashier", DEFAULT_ROLES["cashier"])


@pytest.fixture
async def admin_user(db: AsyncSession, admin_role: Role) -> User:
    return await _create_user(db, "admin@example.com", admin_role)


@pytest.fixture
async def cashier_user(db: AsyncSession, cashier_role: Role) -> User:
    return await _create_user(db, "cashier@example.com", cashier_role)


async def _client_for(
    app: FastAPI, session_store: InMemorySessionStore, user: User
) -> AsyncClient:
    identity = await session_store.create(user.id)
    client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    client.cookies.set(settings.session_cookie_name, identity.session_id)
    return client


@pytest.fixture
async def admin_client(
    app: FastAPI, session_store: InMemorySessionStore, admin_user: User
) -> AsyncGenerator[AsyncClient, None]:
    """Client logged in as a user holding the admin role."""
    async with await _client_for(app, session_store, admin_user) as client:
        yield client


@pytest.fixture
async def cashier_client(
    app: FastAPI, session_store: InMemorySessionStore, cashier_user: User
) -> AsyncGenerator[AsyncClient, None]:
    """Client logged in as a user holding the cashier role."""
    async with await _client_for(app, session_store, cashier_user) as client:
        yield client
