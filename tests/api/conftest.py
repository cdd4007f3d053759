"""
Fixtures for API tests.

The app is created without running its lifespan; every service the
routers depend on is replaced through dependency_overrides.
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from studybuddy.api.deps import (
    get_chat_service,
    get_document_service,
    get_indexing_service,
    get_resume_service,
)
from studybuddy.api.main import create_app
from studybuddy.boundary.db.models.document_model import DocumentModel


@pytest.fixture
def mock_document_service() -> MagicMock:
    """DocumentService double: sync validation, async storage and DB methods."""
    service = MagicMock()
    service.validate_upload = MagicMock(return_value=None)
    service.store_upload = AsyncMock(return_value="./data/uploads/abc_notes.pdf")
    service.discard_upload = AsyncMock(return_value=None)
    service.create_document = AsyncMock()
    service.list_documents = AsyncMock(return_value=[])
    service.get_document = AsyncMock()
    service.delete_document = AsyncMock(return_value=None)
    return service


@pytest.fixture
def mock_indexing_service() -> AsyncMock:
    service = AsyncMock()
    service.schedule = AsyncMock(return_value=True)
    service.is_in_flight = AsyncMock(return_value=False)
    return service


@pytest.fixture
def mock_chat_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_resume_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def app(mock_document_service, mock_indexing_service, mock_chat_service, mock_resume_service):
    app = create_app()
    app.dependency_overrides[get_document_service] = lambda: mock_document_service
    app.dependency_overrides[get_indexing_service] = lambda: mock_indexing_service
    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service
    app.dependency_overrides[get_resume_service] = lambda: mock_resume_service
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers(user_id: uuid.UUID) -> dict[str, str]:
    return {"X-User-Id": str(user_id)}


@pytest.fixture
def make_document(user_id: uuid.UUID):
    """Build transient DocumentModel rows for response mapping."""

    def _make(**overrides) -> DocumentModel:
        values = {
            "id": uuid.uuid4(),
            "user_id": user_id,
            "title": "Biology 101",
            "source_url": "./data/uploads/abc_notes.pdf",
            "total_pages": None,
            "processing_error": None,
            "is_resume": False,
            "resume_metadata": None,
            "chunks": [],
            "created_at": datetime(2026, 2, 1, tzinfo=timezone.utc),
            "updated_at": datetime(2026, 2, 1, tzinfo=timezone.utc),
        }
        values.update(overrides)
        return DocumentModel(**values)

    return _make
