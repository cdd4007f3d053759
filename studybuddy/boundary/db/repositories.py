"""
SQLAlchemy implementations of the core repository protocols.

Each call opens its own AsyncSession from the session factory, so the
repositories are safe to use from background tasks that outlive the
request that scheduled them.

Dependencies: sqlalchemy, studybuddy.boundary.db.CRUD
System role: Adapter between core indexing/retrieval and the database
"""

import logging
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from studybuddy.boundary.db.CRUD import document_crud, resume_review_crud
from studybuddy.core.document_processing.models import Chunk, ReviewSummary
from studybuddy.core.exceptions import DocumentNotFoundError
from studybuddy.core.interfaces import StoredDocument

logger = logging.getLogger(__name__)


def _parse_ids(values: Sequence[str]) -> list[UUID]:
    ids = []
    for value in values:
        try:
            ids.append(value if isinstance(value, UUID) else UUID(str(value)))
        except ValueError:
            logger.warning(f"{__name__}:_parse_ids - Ignoring malformed document id", extra={"value": value})
    return ids


class SQLDocumentRepository:
    """Document repository backed by the documents table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_documents_by_ids(self, document_ids: Sequence[str]) -> list[StoredDocument]:
        """Load documents with their chunk lists; unknown IDs are skipped."""
        ids = _parse_ids(document_ids)
        async with self._session_factory() as session:
            rows = await document_crud.get_by_ids(session, ids)
        return [
            StoredDocument(
                id=str(row.id),
                title=row.title,
                chunks=[Chunk.model_validate(chunk) for chunk in row.chunks or []],
            )
            for row in rows
        ]

    async def update_document_chunks(
        self,
        document_id: str,
        chunks: Sequence[Chunk],
        total_pages: int,
    ) -> None:
        """
        Atomically replace a document's chunks and clear its error.

        Raises:
            DocumentNotFoundError: The document was deleted meanwhile
        """
        payload = [chunk.model_dump() for chunk in chunks]
        async with self._session_factory() as session:
            updated = await document_crud.replace_chunks(session, UUID(str(document_id)), payload, total_pages)
            await session.commit()
        if not updated:
            raise DocumentNotFoundError(str(document_id))

    async def set_document_error(self, document_id: str, message: str) -> None:
        async with self._session_factory() as session:
            await document_crud.set_processing_error(session, UUID(str(document_id)), message)
            await session.commit()


class SQLReviewRepository:
    """Review repository backed by the resume_reviews table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_latest_review(self, document_id: str, user_id: str) -> ReviewSummary | None:
        async with self._session_factory() as session:
            row = await resume_review_crud.get_latest(session, UUID(str(document_id)), UUID(str(user_id)))
        if row is None:
            return None
        return ReviewSummary(
            id=str(row.id),
            document_id=str(row.document_id),
            user_id=str(row.user_id),
            reviewed_at=row.reviewed_at,
            target_role=row.target_role,
            industry=row.industry,
            years_of_experience=row.years_of_experience,
            additional_context=row.additional_context,
            overall_score=row.overall_score,
            ats_score=row.ats_score,
            content_score=row.content_score,
            formatting_score=row.formatting_score,
            top_strengths=list(row.top_strengths or []),
            critical_improvements=list(row.critical_improvements or []),
            quick_wins=list(row.quick_wins or []),
            detailed_feedback=row.detailed_feedback,
        )
