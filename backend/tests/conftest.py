"""Shared test fixtures."""
from collections.abc import AsyncGenerator, Callable

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from api.main import create_app
from core.config import Settings
from db.session import get_async_session
from models import Base, Bookmark

TEST_TOKEN = "test-api-token"
AUTH_HEADERS = {"Authorization": f"Bearer {TEST_TOKEN}"}


def make_bookmarks() -> list[Bookmark]:
    """Three valid bookmarks, inserted with ids 1-3."""
    return [
        Bookmark(
            id=i,
            title=f"Example {i}",
            url=f"https://www.example{i}.com",
            description="Lorem Ipsum",
            rating=i,
        )
        for i in (1, 2, 3)
    ]


def make_malicious_bookmark() -> tuple[dict, dict]:
    """A bookmark with active markup and the sanitized form a client should see."""
    malicious = {
        "id": 911,
        "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "url": "https://www.hackers.com",
        "description": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
        "rating": 1,
    }
    expected = {
        **malicious,
        "title": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
        "description": (
            'Bad image <img src="https://url.to.file.which/does-not.exist">. '
            "But not <strong>all</strong> bad."
        ),
    }
    return malicious, expected


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite engine with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """
    Session shared by the test and every request it makes.

    Requests see each other's writes and the test can inspect the table
    directly.
    """
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def app_factory(db_session: AsyncSession) -> Callable[..., FastAPI]:
    """Build an app with overridden settings, wired to the test session."""

    def _make(**overrides: object) -> FastAPI:
        values = {
            "database_url": "sqlite+aiosqlite:///:memory:",
            "api_token": TEST_TOKEN,
            **overrides,
        }
        app = create_app(Settings(_env_file=None, **values))

        async def _override_session() -> AsyncGenerator[AsyncSession]:
            yield db_session

        app.dependency_overrides[get_async_session] = _override_session
        return app

    return _make


@pytest.fixture
def app(app_factory: Callable[..., FastAPI]) -> FastAPI:
    """Default app: SQL storage, no route prefix."""
    return app_factory()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Client that sends the correct bearer token."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=AUTH_HEADERS,
    ) as client:
        yield client


@pytest.fixture
async def anon_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Client that sends no Authorization header."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def seeded(db_session: AsyncSession) -> list[Bookmark]:
    """Insert the three standard bookmarks."""
    bookmarks = make_bookmarks()
    db_session.add_all(bookmarks)
    await db_session.flush()
    return bookmarks


@pytest.fixture
def malicious_bookmark() -> tuple[dict, dict]:
    """(stored values, values expected in responses) for an XSS bookmark."""
    return make_malicious_bookmark()
