"""
Resume service.

Builds the review context for an owned resume: relevant chunks plus the
latest stored review.

Dependencies: studybuddy.core.retrieval, studybuddy.application.services.document_service
System role: Resume review orchestration
"""

from uuid import UUID

from studybuddy.application.services.document_service import DocumentService
from studybuddy.core.document_processing.models import ResumeReviewContext
from studybuddy.core.exceptions import DocumentNotFoundError
from studybuddy.core.retrieval import ResumeContextAssembler

DEFAULT_REVIEW_QUERY = "work experience, skills, education and achievements"


class ResumeService:
    def __init__(
        self,
        document_service: DocumentService,
        assembler: ResumeContextAssembler,
        default_top_k: int = 5,
    ) -> None:
        self._document_service = document_service
        self._assembler = assembler
        self._default_top_k = default_top_k

    async def get_review_context(
        self,
        document_id: UUID,
        user_id: UUID,
        query: str | None = None,
        top_k: int | None = None,
    ) -> ResumeReviewContext:
        """
        Assemble review context for a resume owned by the user.

        When no query is given, the stored target role (if any) steers
        retrieval, falling back to a general resume query.

        Raises:
            DocumentNotFoundError: Missing, not owned, or not a resume
            NoContentError: Resume not indexed yet
        """
        document = await self._document_service.get_document(document_id, user_id)
        if not document.is_resume:
            raise DocumentNotFoundError(str(document_id), details={"reason": "Document is not a resume"})

        if not query:
            target_role = (document.resume_metadata or {}).get("target_role")
            query = f"{target_role}: {DEFAULT_REVIEW_QUERY}" if target_role else DEFAULT_REVIEW_QUERY

        return await self._assembler.build_review_context(
            query, str(document_id), str(user_id), top_k or self._default_top_k
        )
