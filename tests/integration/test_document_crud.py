"""
Integration tests for document persistence.

Runs DocumentCRUD, ResumeReviewCRUD and the SQL repositories against an
in-memory SQLite database.

System role: Verification of document persistence layer
"""

import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from studybuddy.boundary.db import (
    DocumentModel,
    DocumentStatus,
    ResumeReviewModel,
    SQLDocumentRepository,
    SQLReviewRepository,
    document_crud,
    resume_review_crud,
)
from studybuddy.core.document_processing.entrypoint import DocumentIndexer
from studybuddy.core.document_processing.models import Chunk, ExtractedText
from studybuddy.core.document_processing.tasks import ChunkingTask, EmbeddingTask
from studybuddy.core.exceptions import DocumentNotFoundError, FetchError, NoContentError
from studybuddy.core.retrieval import SimilarityRetriever

BASE_TIME = datetime(2026, 1, 10, 9, 0, tzinfo=timezone.utc)


async def add_document(session_factory, user_id: uuid.UUID, **overrides) -> DocumentModel:
    values = {
        "user_id": user_id,
        "title": "Biology 101.pdf",
        "source_url": "s3://course-bucket/biology.pdf",
        "chunks": [],
    }
    values.update(overrides)
    async with session_factory() as session:
        document = await document_crud.create(session, **values)
        await session.commit()
    return document


async def load(session_factory, document_id: uuid.UUID) -> DocumentModel:
    async with session_factory() as session:
        return await document_crud.get_by_id(session, document_id)


class TestDocumentStatus:
    """Test derived document status."""

    @pytest.mark.asyncio
    async def test_new_document_is_processing(self, test_session_factory, user_id) -> None:
        document = await add_document(test_session_factory, user_id)

        assert document.status == DocumentStatus.PROCESSING
        assert document.chunk_count == 0
        assert document.total_pages is None

    @pytest.mark.asyncio
    async def test_replace_chunks_marks_ready_and_clears_error(self, test_session_factory, user_id) -> None:
        # Arrange
        document = await add_document(test_session_factory, user_id, processing_error="old failure")
        chunks = [{"text": "Cells are the unit of life.", "page_number": 1, "embedding": [0.1, 0.2]}]

        # Act
        async with test_session_factory() as session:
            updated = await document_crud.replace_chunks(session, document.id, chunks, total_pages=3)
            await session.commit()

        # Assert
        assert updated is True
        stored = await load(test_session_factory, document.id)
        assert stored.status == DocumentStatus.READY
        assert stored.processing_error is None
        assert stored.total_pages == 3
        assert stored.chunks == chunks

    @pytest.mark.asyncio
    async def test_processing_error_marks_failed_and_clears_chunks(self, test_session_factory, user_id) -> None:
        chunks = [{"text": "Earlier run", "page_number": 1, "embedding": [1.0, 0.0]}]
        document = await add_document(test_session_factory, user_id, chunks=chunks)

        async with test_session_factory() as session:
            await document_crud.set_processing_error(session, document.id, "Remote source returned HTTP 404")
            await session.commit()

        stored = await load(test_session_factory, document.id)
        assert stored.status == DocumentStatus.FAILED
        assert stored.processing_error == "Remote source returned HTTP 404"
        assert stored.chunks == []
        assert stored.chunk_count == 0

    @pytest.mark.asyncio
    async def test_replace_chunks_on_missing_document_returns_false(self, test_session_factory) -> None:
        async with test_session_factory() as session:
            updated = await document_crud.replace_chunks(session, uuid.uuid4(), [], total_pages=1)

        assert updated is False


class TestDocumentQueries:
    """Test owner-scoped queries."""

    @pytest.mark.asyncio
    async def test_get_by_user_filters_and_orders_newest_first(self, test_session_factory, user_id) -> None:
        # Arrange
        older = await add_document(test_session_factory, user_id, title="old.pdf", created_at=BASE_TIME)
        newer = await add_document(
            test_session_factory, user_id, title="new.pdf", created_at=BASE_TIME + timedelta(hours=1)
        )
        resume = await add_document(
            test_session_factory,
            user_id,
            title="cv.pdf",
            is_resume=True,
            created_at=BASE_TIME + timedelta(hours=2),
        )
        await add_document(test_session_factory, uuid.uuid4(), title="someone-else.pdf")

        # Act
        async with test_session_factory() as session:
            everything = await document_crud.get_by_user(session, user_id)
            resumes = await document_crud.get_by_user(session, user_id, is_resume=True)
            courses = await document_crud.get_by_user(session, user_id, is_resume=False)

        # Assert
        assert [d.id for d in everything] == [resume.id, newer.id, older.id]
        assert [d.id for d in resumes] == [resume.id]
        assert [d.id for d in courses] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_get_owned_hides_other_users_documents(self, test_session_factory, user_id) -> None:
        document = await add_document(test_session_factory, user_id)

        async with test_session_factory() as session:
            assert await document_crud.get_owned(session, document.id, user_id) is not None
            assert await document_crud.get_owned(session, document.id, uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_delete_document_removes_reviews(self, test_session_factory, user_id) -> None:
        # Arrange
        document = await add_document(test_session_factory, user_id, is_resume=True)
        async with test_session_factory() as session:
            await resume_review_crud.create(session, user_id=user_id, document_id=document.id, overall_score=70)
            await session.commit()

        # Act
        async with test_session_factory() as session:
            not_owner = await document_crud.delete_document(session, document.id, uuid.uuid4())
            deleted = await document_crud.delete_document(session, document.id, user_id)
            await session.commit()

        # Assert
        assert not_owner is False
        assert deleted is True
        assert await load(test_session_factory, document.id) is None
        async with test_session_factory() as session:
            assert await resume_review_crud.get_latest(session, document.id, user_id) is None


class TestSQLDocumentRepository:
    """Test the repository used by indexing and retrieval."""

    @pytest.mark.asyncio
    async def test_update_then_get_round_trips_chunks(self, test_session_factory, user_id) -> None:
        # Arrange
        document = await add_document(test_session_factory, user_id)
        repository = SQLDocumentRepository(test_session_factory)
        chunks = [
            Chunk(text="Mitochondria produce ATP.", page_number=2, embedding=[0.5, 0.5]),
            Chunk(text="Ribosomes build proteins.", page_number=3, embedding=[0.1, 0.9]),
        ]

        # Act
        await repository.update_document_chunks(str(document.id), chunks, 4)
        stored = await repository.get_documents_by_ids([str(document.id)])

        # Assert
        assert len(stored) == 1
        assert stored[0].id == str(document.id)
        assert stored[0].title == "Biology 101.pdf"
        assert stored[0].chunks == chunks

    @pytest.mark.asyncio
    async def test_update_missing_document_raises(self, test_session_factory) -> None:
        repository = SQLDocumentRepository(test_session_factory)

        with pytest.raises(DocumentNotFoundError):
            await repository.update_document_chunks(str(uuid.uuid4()), [], 1)

    @pytest.mark.asyncio
    async def test_get_documents_skips_unknown_and_malformed_ids(self, test_session_factory, user_id) -> None:
        document = await add_document(test_session_factory, user_id)
        repository = SQLDocumentRepository(test_session_factory)

        stored = await repository.get_documents_by_ids([str(document.id), str(uuid.uuid4()), "not-a-uuid"])

        assert [d.id for d in stored] == [str(document.id)]

    @pytest.mark.asyncio
    async def test_set_document_error(self, test_session_factory, user_id) -> None:
        document = await add_document(test_session_factory, user_id)
        repository = SQLDocumentRepository(test_session_factory)

        await repository.set_document_error(str(document.id), "PDF contains no extractable text")

        stored = await load(test_session_factory, document.id)
        assert stored.processing_error == "PDF contains no extractable text"
        assert stored.status == DocumentStatus.FAILED


class TestSQLReviewRepository:
    """Test latest review lookup."""

    @pytest.mark.asyncio
    async def test_returns_most_recent_review(self, test_session_factory, user_id) -> None:
        # Arrange
        document = await add_document(test_session_factory, user_id, is_resume=True)
        async with test_session_factory() as session:
            for days, score in ((0, 55), (14, 81), (7, 68)):
                session.add(
                    ResumeReviewModel(
                        user_id=user_id,
                        document_id=document.id,
                        overall_score=score,
                        target_role="Data Analyst",
                        top_strengths=["SQL"],
                        reviewed_at=BASE_TIME + timedelta(days=days),
                    )
                )
            await session.commit()
        repository = SQLReviewRepository(test_session_factory)

        # Act
        review = await repository.get_latest_review(str(document.id), str(user_id))

        # Assert
        assert review is not None
        assert review.overall_score == 81
        assert review.document_id == str(document.id)
        assert review.top_strengths == ["SQL"]

    @pytest.mark.asyncio
    async def test_returns_none_without_reviews(self, test_session_factory, user_id) -> None:
        document = await add_document(test_session_factory, user_id, is_resume=True)
        repository = SQLReviewRepository(test_session_factory)

        assert await repository.get_latest_review(str(document.id), str(user_id)) is None


class TestFailedReindex:
    """Test that a failed re-index leaves nothing retrievable."""

    @pytest.mark.asyncio
    async def test_failed_reindex_clears_previous_chunks(
        self, test_session_factory, user_id, fake_embedding_client
    ) -> None:
        # Arrange
        document = await add_document(test_session_factory, user_id)
        repository = SQLDocumentRepository(test_session_factory)
        client = fake_embedding_client()
        extractor = AsyncMock()
        extractor.extract = AsyncMock(return_value=ExtractedText(text="m" * 700, page_count=1))
        fetcher = AsyncMock()
        fetcher.fetch = AsyncMock(side_effect=FetchError("Remote source returned HTTP 404", "https://x/b.pdf"))
        indexer = DocumentIndexer(
            fetcher=fetcher,
            extractor=extractor,
            chunking_task=ChunkingTask(chunk_size=800, chunk_overlap=100, min_chunk_length=50),
            embedding_task=EmbeddingTask(client, batch_size=5, batch_delay_seconds=0),
            repository=repository,
        )
        await indexer.index(str(document.id), "https://x/b.pdf", raw_bytes=b"%PDF")
        assert (await load(test_session_factory, document.id)).chunk_count == 1

        # Act
        with pytest.raises(FetchError):
            await indexer.index(str(document.id), "https://x/b.pdf")

        # Assert
        stored = await load(test_session_factory, document.id)
        assert stored.status == DocumentStatus.FAILED
        assert stored.chunks == []
        with pytest.raises(NoContentError):
            await SimilarityRetriever(client, repository).retrieve("mmm", [str(document.id)])
