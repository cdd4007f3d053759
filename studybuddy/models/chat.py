"""
Chat request/response schemas.

Dependencies: pydantic
System role: Chat API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from studybuddy.models.citation import Citation


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    document_ids: list[uuid.UUID] = Field(min_length=1, description="Documents to ground the answer in")
    message: str = Field(min_length=1, description="Student question")
    top_k: int | None = Field(
        default=None,
        ge=1,
        le=50,
        description="Chunks included in the prompt (server default when omitted)",
    )

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        """Reject whitespace-only questions before any embedding call."""
        message = v.strip()
        if not message:
            raise ValueError("Please provide a message")
        return message


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    answer: str
    citations: list[Citation]


class ChatHistoryMessage(BaseModel):
    """One stored chat turn."""

    id: uuid.UUID
    role: str
    content: str
    citations: list[Citation] = Field(default_factory=list)
    created_at: datetime


class ChatHistoryResponse(BaseModel):
    """Stored conversation for one document, oldest message first."""

    document_id: uuid.UUID
    document_title: str | None = None
    messages: list[ChatHistoryMessage]
