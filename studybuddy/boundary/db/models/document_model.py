"""
Document ORM model.

Represents uploaded course PDFs and resumes together with their chunk
list. Chunks (text, page number, embedding) are stored inline as JSON and
replaced wholesale on every successful indexing run.

Dependencies: sqlalchemy, studybuddy.boundary.db.base
System role: Document persistence for indexing and retrieval
"""

import enum
import uuid
from typing import Any

from sqlalchemy import JSON, Boolean, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studybuddy.boundary.db.base import Base, TimestampMixin, UUIDMixin


class DocumentStatus(str, enum.Enum):
    """
    Document indexing state, derived from stored columns.

    PROCESSING: Uploaded, indexing not finished
    READY: Indexing finished; chunks available for retrieval
    FAILED: Indexing error; processing_error holds details
    """

    PROCESSING = "processing"
    READY = "ready"
    FAILED = "failed"


class DocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Document ORM model holding source locator, metadata and chunks.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owner UUID
        title: Display title (defaults to the uploaded filename)
        source_url: http(s) URL, s3:// URI or local path of the raw PDF
        total_pages: Page count, null until indexed
        processing_error: Last indexing error, null on success
        is_resume: True for resume uploads
        resume_metadata: Target role, industry, years of experience, extra context
        chunks: JSON list of {text, page_number, embedding}

    Relationships:
        reviews: ResumeReviewModel rows (cascade delete)
        chat_messages: ChatMessageModel rows (cascade delete)
    """

    __tablename__ = "documents"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    source_url: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        doc="URL, s3:// URI or file path for raw document",
    )

    total_pages: Mapped[int | None] = mapped_column(Integer, nullable=True)

    processing_error: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        doc="Error details if indexing failed",
    )

    is_resume: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    resume_metadata: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    chunks: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    reviews = relationship(
        "ResumeReviewModel",
        back_populates="document",
        cascade="all, delete-orphan",
    )

    chat_messages = relationship(
        "ChatMessageModel",
        back_populates="document",
        cascade="all, delete-orphan",
    )

    @property
    def status(self) -> DocumentStatus:
        if self.processing_error:
            return DocumentStatus.FAILED
        if self.chunks:
            return DocumentStatus.READY
        return DocumentStatus.PROCESSING

    @property
    def chunk_count(self) -> int:
        return len(self.chunks or [])
