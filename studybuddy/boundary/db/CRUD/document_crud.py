"""
Document CRUD operations.

Extends BaseCRUD with owner filtering, batched lookups for retrieval and
the two indexing writes (chunk replacement, error recording).

Dependencies: sqlalchemy, studybuddy.boundary.db.models
System role: Document persistence operations
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from studybuddy.boundary.db.CRUD.base_crud import BaseCRUD
from studybuddy.boundary.db.models.document_model import DocumentModel


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """CRUD operations for DocumentModel."""

    def __init__(self) -> None:
        super().__init__(DocumentModel)

    async def get_by_ids(
        self,
        session: AsyncSession,
        ids: Sequence[UUID],
    ) -> Sequence[DocumentModel]:
        """
        Retrieve documents by a list of IDs.

        Args:
            session: Async database session
            ids: Document UUIDs (unknown IDs are ignored)

        Returns:
            Sequence of matching DocumentModels
        """
        if not ids:
            return []
        stmt = select(DocumentModel).where(DocumentModel.id.in_(ids))
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: UUID,
        is_resume: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[DocumentModel]:
        """
        Retrieve a user's documents, newest first.

        Args:
            session: Async database session
            user_id: Owner UUID
            is_resume: Filter on resume flag (None for all)
            limit: Maximum number of documents to return
            offset: Number of documents to skip

        Returns:
            Sequence of DocumentModels owned by the user
        """
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.user_id == user_id)
            .order_by(DocumentModel.created_at.desc())
            .offset(offset)
        )
        if is_resume is not None:
            stmt = stmt.where(DocumentModel.is_resume == is_resume)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_owned(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: UUID,
    ) -> DocumentModel | None:
        """Retrieve a document only if it belongs to ``user_id``."""
        stmt = select(DocumentModel).where(
            DocumentModel.id == id,
            DocumentModel.user_id == user_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def replace_chunks(
        self,
        session: AsyncSession,
        id: UUID,
        chunks: list[dict[str, Any]],
        total_pages: int,
    ) -> bool:
        """
        Replace the chunk list and page count, clearing any previous error.

        Args:
            session: Async database session
            id: Document UUID
            chunks: Serialized chunks ({text, page_number, embedding})
            total_pages: Page count from extraction

        Returns:
            True if the document exists
        """
        return await self.update_by_id(
            session,
            id,
            chunks=chunks,
            total_pages=total_pages,
            processing_error=None,
        )

    async def set_processing_error(self, session: AsyncSession, id: UUID, message: str) -> bool:
        """
        Record an indexing error and clear stored chunks in the same UPDATE.

        A failed document never keeps chunks from an earlier run, so
        retrieval cannot return content from a document reported as failed.
        """
        return await self.update_by_id(session, id, processing_error=message, chunks=[])

    async def delete_document(self, session: AsyncSession, id: UUID, user_id: UUID) -> bool:
        """
        Delete an owned document with its reviews and chat history.

        Args:
            session: Async database session
            id: Document UUID
            user_id: Owner UUID

        Returns:
            True if the document was deleted, False if missing or not owned
        """
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.id == id, DocumentModel.user_id == user_id)
            .options(selectinload(DocumentModel.reviews), selectinload(DocumentModel.chat_messages))
        )
        result = await session.execute(stmt)
        document = result.scalar_one_or_none()
        if document is None:
            return False
        await session.delete(document)
        await session.flush()
        return True


document_crud = DocumentCRUD()
