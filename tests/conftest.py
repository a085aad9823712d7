"""Pytest configuration and fixtures.

Database fixtures use an in-memory SQLite database (aiosqlite) with the schema
created from the models, so repository, GraphQL and API tests run without a
Postgres server. HTTP tests use app.main:app with the session dependencies
overridden to that database.
"""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.api.graphql.context import GraphQLContext
from app.application.services.object_identification import NodeRouter
from app.application.services.user_service import UserService
from app.infrastructure.persistence.database import (
    create_tables,
    enable_sqlite_savepoints,
    get_db,
    get_db_transactional,
)
from app.infrastructure.persistence.node_types import get_node_registry
from app.infrastructure.persistence.repositories import UserRepository
from app.main import app

_TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory database per test (StaticPool keeps one shared connection)."""
    test_engine = create_async_engine(_TEST_DATABASE_URL, poolclass=StaticPool)
    enable_sqlite_savepoints(test_engine)
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def graphql_context(db_session: AsyncSession) -> GraphQLContext:
    """Context for schema.execute() bound to the test session."""
    return GraphQLContext(
        nodes=NodeRouter(get_node_registry(), db_session),
        users=UserService(UserRepository(db_session)),
    )


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), backed by the test database."""

    async def _get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    async def _get_db_transactional() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
