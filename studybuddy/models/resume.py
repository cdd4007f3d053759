"""
Resume context schemas.

Dependencies: pydantic
System role: Resume API contracts
"""

import uuid

from pydantic import BaseModel

from studybuddy.core.document_processing.models import ReviewSummary


class ResumePassage(BaseModel):
    """A retrieved resume chunk."""

    page_number: int
    text: str
    similarity: float


class ResumeContextResponse(BaseModel):
    """Retrieved resume passages plus the latest review."""

    document_id: uuid.UUID
    passages: list[ResumePassage]
    latest_review: ReviewSummary | None = None
