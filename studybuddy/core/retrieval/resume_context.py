"""
Resume review context assembly.

Combines similarity retrieval over a resume with the most recent stored
review so prompt construction can reference previous feedback.

Dependencies: studybuddy.core.interfaces
System role: Context builder for resume review prompts
"""

import logging
from collections.abc import Sequence

from studybuddy.core.document_processing.models import (
    ResumeReviewContext,
    RetrievalResult,
    ReviewSummary,
)
from studybuddy.core.interfaces import ReviewRepository

from .retriever import SimilarityRetriever

logger = logging.getLogger(__name__)


class ResumeContextAssembler:
    """Gather resume chunks and the latest review for a user."""

    def __init__(self, retriever: SimilarityRetriever, review_repository: ReviewRepository) -> None:
        self._retriever = retriever
        self._review_repository = review_repository

    async def assemble_context(
        self,
        query: str,
        document_ids: Sequence[str],
        top_k: int = 5,
    ) -> list[RetrievalResult]:
        """Retrieve resume chunks relevant to ``query``."""
        return await self._retriever.retrieve(query, document_ids, top_k)

    async def latest_review(self, document_id: str, user_id: str) -> ReviewSummary | None:
        """Return the most recent review of the document by the user, if any."""
        return await self._review_repository.get_latest_review(document_id, user_id)

    async def build_review_context(
        self,
        query: str,
        document_id: str,
        user_id: str,
        top_k: int = 5,
    ) -> ResumeReviewContext:
        """
        Bundle retrieved chunks with the latest review.

        Args:
            query: Focus of the review (e.g. target role)
            document_id: Resume document
            user_id: Owner of the resume
            top_k: Maximum chunks to include

        Returns:
            ResumeReviewContext: Chunks plus latest review (None if never reviewed)

        Raises:
            NoContentError: The resume has not been indexed yet
        """
        chunks = await self.assemble_context(query, [document_id], top_k)
        review = await self.latest_review(document_id, user_id)
        logger.info(
            f"{__name__}:build_review_context - Assembled resume context",
            extra={
                "document_id": document_id,
                "chunks": len(chunks),
                "has_review": review is not None,
            },
        )
        return ResumeReviewContext(chunks=chunks, latest_review=review)
