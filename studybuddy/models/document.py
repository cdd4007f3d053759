"""
Document request/response schemas.

Dependencies: pydantic
System role: Document API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class ResumeMetadata(BaseModel):
    """Context supplied with a resume upload."""

    target_role: str | None = None
    industry: str | None = None
    years_of_experience: int | None = Field(default=None, ge=0)
    additional_context: str | None = None


class DocumentResponse(BaseModel):
    """Response schema for document operations (no chunk data)."""

    id: uuid.UUID
    title: str
    status: str
    indexing_in_progress: bool = False
    is_resume: bool
    total_pages: int | None = None
    chunk_count: int = 0
    processing_error: str | None = None
    resume_metadata: ResumeMetadata | None = None
    created_at: datetime
    updated_at: datetime


class DocumentListResponse(BaseModel):
    """Document list response."""

    documents: list[DocumentResponse]
    total: int


class ReindexResponse(BaseModel):
    """Response schema for an explicit re-index request."""

    document_id: uuid.UUID
    status: str
    message: str
