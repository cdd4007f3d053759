"""
Chat history adapter.

Business-level interface over ChatMessageCRUD: records question/answer
turns with their citations and reads a conversation back as API schemas.

Dependencies: studybuddy.boundary.db.CRUD.chat_message_crud
System role: Chat history business logic adapter
"""

import logging
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from studybuddy.boundary.db.CRUD.chat_message_crud import chat_message_crud
from studybuddy.models.chat import ChatHistoryMessage, Citation

logger = logging.getLogger(__name__)


class ChatHistoryAdapter:
    """Chat history for one user, filed per document."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize chat history adapter.

        Args:
            db: AsyncSession for database operations
        """
        self.db = db

    async def add_turn(
        self,
        user_id: UUID,
        document_id: UUID,
        question: str,
        answer: str,
        citations: Sequence[Citation],
    ) -> None:
        """Store a question and its cited answer, then commit."""
        await chat_message_crud.add_turn(
            self.db,
            user_id=user_id,
            document_id=document_id,
            question=question,
            answer=answer,
            citations=[citation.model_dump() for citation in citations],
        )
        await self.db.commit()
        logger.info(
            f"{__name__}:add_turn - Chat turn stored",
            extra={"document_id": str(document_id), "citations": len(citations)},
        )

    async def get_messages(
        self,
        user_id: UUID,
        document_id: UUID,
        limit: int | None = None,
    ) -> list[ChatHistoryMessage]:
        """
        Get a conversation oldest message first.

        Args:
            user_id: Conversation owner
            document_id: Document the conversation is filed under
            limit: Keep only the most recent ``limit`` messages

        Returns:
            list[ChatHistoryMessage]: Stored messages with citations
        """
        rows = await chat_message_crud.get_history(self.db, document_id, user_id, limit=limit)
        return [
            ChatHistoryMessage(
                id=row.id,
                role=row.role,
                content=row.content,
                citations=[Citation(**citation) for citation in row.citations or []],
                created_at=row.created_at,
            )
            for row in rows
        ]

    async def clear(self, user_id: UUID, document_id: UUID) -> int:
        """Delete a conversation and commit; returns the number of messages removed."""
        deleted = await chat_message_crud.clear_history(self.db, document_id, user_id)
        await self.db.commit()
        logger.info(
            f"{__name__}:clear - Chat history cleared",
            extra={"document_id": str(document_id), "deleted": deleted},
        )
        return deleted
