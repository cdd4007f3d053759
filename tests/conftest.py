"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite database, fake embedding client, repository
mocks and sample identifiers.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from studybuddy.core.exceptions import EmbeddingProviderError


class FakeEmbeddingClient:
    """
    Deterministic embedding client for tests.

    Vectors come from ``vectors`` when the text is listed there, otherwise
    from a simple character histogram. Texts starting with any prefix in
    ``fail_prefixes`` raise EmbeddingProviderError.
    """

    def __init__(self, vectors=None, fail_prefixes=(), dimension=8):
        self.vectors = dict(vectors or {})
        self.fail_prefixes = tuple(fail_prefixes)
        self.dimension = dimension
        self.calls = []

    async def embed(self, text):
        self.calls.append(text)
        if self.fail_prefixes and text.startswith(self.fail_prefixes):
            raise EmbeddingProviderError("quota exceeded", model="fake")
        if text in self.vectors:
            return list(self.vectors[text])
        vector = [0.0] * self.dimension
        for char in text:
            vector[ord(char) % self.dimension] += 1.0
        return vector


@pytest.fixture
def fake_embedding_client():
    """Provide a fresh FakeEmbeddingClient factory."""
    return FakeEmbeddingClient


@pytest.fixture
def mock_document_repository():
    """Provide a DocumentRepository mock with async methods."""
    repository = AsyncMock()
    repository.get_documents_by_ids = AsyncMock(return_value=[])
    repository.update_document_chunks = AsyncMock(return_value=None)
    repository.set_document_error = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def user_id() -> uuid.UUID:
    """Provide a sample user UUID."""
    return uuid.uuid4()


@pytest_asyncio.fixture
async def test_session_factory():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        async_sessionmaker: Session factory bound to a fresh schema
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from studybuddy.boundary.db import models  # noqa: F401
    from studybuddy.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_async_db(test_session_factory):
    """
    Provide a session on the in-memory database.

    Yields:
        AsyncSession: Test database session, rolled back afterwards
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()
