"""
Resume review CRUD operations.

Dependencies: sqlalchemy, studybuddy.boundary.db.models
System role: Review history persistence operations
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studybuddy.boundary.db.CRUD.base_crud import BaseCRUD
from studybuddy.boundary.db.models.resume_review_model import ResumeReviewModel


class ResumeReviewCRUD(BaseCRUD[ResumeReviewModel]):
    """CRUD operations for ResumeReviewModel."""

    def __init__(self) -> None:
        super().__init__(ResumeReviewModel)

    async def get_latest(
        self,
        session: AsyncSession,
        document_id: UUID,
        user_id: UUID,
    ) -> ResumeReviewModel | None:
        """
        Retrieve the most recent review of a document by a user.

        Args:
            session: Async database session
            document_id: Resume document UUID
            user_id: Owner UUID

        Returns:
            Review with the greatest reviewed_at, or None
        """
        stmt = (
            select(ResumeReviewModel)
            .where(
                ResumeReviewModel.document_id == document_id,
                ResumeReviewModel.user_id == user_id,
            )
            .order_by(ResumeReviewModel.reviewed_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


resume_review_crud = ResumeReviewCRUD()
