"""
Chat message CRUD operations.

Stores each question/answer turn as two rows and reads a conversation
back in the order it happened.

Dependencies: sqlalchemy, studybuddy.boundary.db.models
System role: Chat history persistence operations
"""

from datetime import datetime, timezone
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import case, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from studybuddy.boundary.db.CRUD.base_crud import BaseCRUD
from studybuddy.boundary.db.models.chat_message_model import ChatMessageModel, ChatRole


class ChatMessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel."""

    def __init__(self) -> None:
        super().__init__(ChatMessageModel)

    async def add_turn(
        self,
        session: AsyncSession,
        user_id: UUID,
        document_id: UUID,
        question: str,
        answer: str,
        citations: list[dict[str, Any]],
    ) -> tuple[ChatMessageModel, ChatMessageModel]:
        """
        Store a question and its answer.

        Both rows share one timestamp; the user row sorts first within a turn.

        Args:
            session: Async database session
            user_id: Conversation owner UUID
            document_id: Document the conversation is filed under
            question: Student question
            answer: Assistant answer
            citations: Serialized citations for the answer

        Returns:
            (user message, assistant message)
        """
        now = datetime.now(timezone.utc)
        user_message = ChatMessageModel(
            user_id=user_id,
            document_id=document_id,
            role=ChatRole.USER.value,
            content=question,
            citations=[],
            created_at=now,
            updated_at=now,
        )
        assistant_message = ChatMessageModel(
            user_id=user_id,
            document_id=document_id,
            role=ChatRole.ASSISTANT.value,
            content=answer,
            citations=citations,
            created_at=now,
            updated_at=now,
        )
        session.add_all([user_message, assistant_message])
        await session.flush()
        return user_message, assistant_message

    async def get_history(
        self,
        session: AsyncSession,
        document_id: UUID,
        user_id: UUID,
        limit: int | None = None,
    ) -> Sequence[ChatMessageModel]:
        """
        Retrieve a user's conversation for a document, oldest first.

        Args:
            session: Async database session
            document_id: Document UUID
            user_id: Owner UUID
            limit: Keep only the most recent ``limit`` messages

        Returns:
            Sequence of ChatMessageModels in conversation order
        """
        role_order = case((ChatMessageModel.role == ChatRole.USER.value, 0), else_=1)
        stmt = (
            select(ChatMessageModel)
            .where(
                ChatMessageModel.document_id == document_id,
                ChatMessageModel.user_id == user_id,
            )
            .order_by(ChatMessageModel.created_at.desc(), role_order.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return list(reversed(result.scalars().all()))

    async def clear_history(self, session: AsyncSession, document_id: UUID, user_id: UUID) -> int:
        """Delete a user's conversation for a document; returns the number of rows removed."""
        stmt = delete(ChatMessageModel).where(
            ChatMessageModel.document_id == document_id,
            ChatMessageModel.user_id == user_id,
        )
        result = await session.execute(stmt)
        return result.rowcount


chat_message_crud = ChatMessageCRUD()
