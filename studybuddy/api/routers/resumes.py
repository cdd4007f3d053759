"""
Resume API endpoints.

Routes:
- GET /resumes/{id}/context - Retrieved resume passages plus latest review

Dependencies: studybuddy.application.services.resume_service
System role: Resume review HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from studybuddy.api.deps import get_current_user_id, get_resume_service
from studybuddy.application.services import ResumeService
from studybuddy.models.resume import ResumeContextResponse, ResumePassage

from .router_utils import handle_service_errors

router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.get("/{document_id}/context", response_model=ResumeContextResponse)
@handle_service_errors
async def get_resume_context(
    document_id: UUID,
    query: str | None = None,
    top_k: int | None = Query(default=None, ge=1, le=50),
    user_id: UUID = Depends(get_current_user_id),
    resume_service: ResumeService = Depends(get_resume_service),
) -> ResumeContextResponse:
    """
    Get the context used to review a resume.

    Raises:
        HTTPException(404): Not an owned resume
        HTTPException(409): Resume still being processed
    """
    context = await resume_service.get_review_context(document_id, user_id, query=query, top_k=top_k)
    return ResumeContextResponse(
        document_id=document_id,
        passages=[
            ResumePassage(page_number=chunk.page_number, text=chunk.text, similarity=chunk.similarity)
            for chunk in context.chunks
        ],
        latest_review=context.latest_review,
    )
