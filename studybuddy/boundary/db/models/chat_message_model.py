"""
Chat message ORM model.

One row per chat turn half (student question or assistant answer), kept
per user and document. Assistant rows carry the page citations shown
with the answer.

Dependencies: sqlalchemy, studybuddy.boundary.db.base
System role: Chat history persistence
"""

import enum
import uuid
from typing import Any

from sqlalchemy import JSON, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studybuddy.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ChatRole(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessageModel(Base, UUIDMixin, TimestampMixin):
    """
    Chat message ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Conversation owner UUID
        document_id: Document the conversation is filed under (cascade delete)
        role: "user" or "assistant"
        content: Message text
        citations: JSON list of citation dicts (empty for user messages)
    """

    __tablename__ = "chat_messages"

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)

    document_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role: Mapped[str] = mapped_column(String(16), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    citations: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    document = relationship("DocumentModel", back_populates="chat_messages")
