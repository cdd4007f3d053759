"""
Resume review ORM model.

Stores a structured review of a resume document, including a snapshot of
the resume context the review was written against.

Dependencies: sqlalchemy, studybuddy.boundary.db.base
System role: Review history persistence for resume context assembly
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studybuddy.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ResumeReviewModel(Base, UUIDMixin, TimestampMixin):
    """
    Resume review ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Reviewer / resume owner UUID
        document_id: Reviewed resume (cascade delete)
        target_role, industry, years_of_experience, additional_context: Context snapshot
        overall_score, ats_score, content_score, formatting_score: 0-100 scores
        top_strengths, critical_improvements, quick_wins: JSON string lists
        detailed_feedback: Free-form feedback
        reviewed_at: Review timestamp (UTC); latest review = max reviewed_at
    """

    __tablename__ = "resume_reviews"

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)

    document_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    target_role: Mapped[str | None] = mapped_column(String(255), nullable=True)
    industry: Mapped[str | None] = mapped_column(String(255), nullable=True)
    years_of_experience: Mapped[int | None] = mapped_column(Integer, nullable=True)
    additional_context: Mapped[str | None] = mapped_column(Text, nullable=True)

    overall_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    ats_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    content_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    formatting_score: Mapped[int | None] = mapped_column(Integer, nullable=True)

    top_strengths: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    critical_improvements: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    quick_wins: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    detailed_feedback: Mapped[str | None] = mapped_column(Text, nullable=True)

    reviewed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    document = relationship("DocumentModel", back_populates="reviews")
