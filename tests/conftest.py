"""Shared fixtures: in-memory database, app with overridden dependencies, HTTP client."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEV_MODE", "false")

from collections.abc import AsyncGenerator, Callable  # noqa: E402

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

from api.dependencies import get_async_session, get_session  # noqa: E402
from api.main import create_app  # noqa: E402
from core.auth import Identity  # noqa: E402
from models import Base, Link, Role, User  # noqa: E402


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory SQLite database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session shared by the test body and the app under test."""
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def app(db_session: AsyncSession) -> FastAPI:
    """Application using the test session and no session by default."""
    app = create_app()

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_session] = lambda: None
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def login(app: FastAPI) -> Callable[[str], Identity]:
    """Make subsequent requests carry a session for the given email."""
    def _login(email: str) -> Identity:
        identity = Identity(claims={"sub": f"auth0|{email}", "email": email}, access_token="token")
        app.dependency_overrides[get_session] = lambda: identity
        return identity

    return _login


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> User:
    """Stored user with the ADMIN role."""
    user = User(email="admin@example.com", role=Role.ADMIN)
    db_session.add(user)
    await db_session.flush()
    return user


@pytest.fixture
async def regular_user(db_session: AsyncSession) -> User:
    """Stored user with the default USER role."""
    user = User(email="user@example.com")
    db_session.add(user)
    await db_session.flush()
    return user


@pytest.fixture
def make_links(db_session: AsyncSession) -> Callable:
    """Insert links with the given ids (ids define the store order)."""
    async def _make_links(*ids: str) -> list[Link]:
        links = [
            Link(
                id=link_id,
                title=f"Link {link_id}",
                url=f"https://example.com/{link_id.lower()}",
                description=f"Description of {link_id}",
                image_url=f"https://example.com/{link_id.lower()}.png",
                category="Open Source",
            )
            for link_id in ids
        ]
        db_session.add_all(links)
        await db_session.flush()
        return links

    return _make_links
