"""
Resume review projections.

Dependencies: pydantic
System role: Data passed from the review store to prompt construction
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .retrieval_result import RetrievalResult


class ReviewSummary(BaseModel):
    """Most recent structured review of a resume."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    document_id: str
    user_id: str
    reviewed_at: datetime
    target_role: str | None = None
    industry: str | None = None
    years_of_experience: int | None = None
    additional_context: str | None = None
    overall_score: int | None = Field(default=None, ge=0, le=100)
    ats_score: int | None = Field(default=None, ge=0, le=100)
    content_score: int | None = Field(default=None, ge=0, le=100)
    formatting_score: int | None = Field(default=None, ge=0, le=100)
    top_strengths: list[str] = Field(default_factory=list)
    critical_improvements: list[str] = Field(default_factory=list)
    quick_wins: list[str] = Field(default_factory=list)
    detailed_feedback: str | None = None


class ResumeReviewContext(BaseModel):
    """Retrieved resume chunks plus the latest review, ready for a prompt."""

    chunks: list[RetrievalResult]
    latest_review: ReviewSummary | None = None
