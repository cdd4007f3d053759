"""
Document service orchestrator.

Handles the document lifecycle around indexing: storing uploads, creating
rows, listing, lookup with ownership checks and deletion.

Dependencies: sqlalchemy, studybuddy.boundary.db
System role: Document management orchestration
"""

import asyncio
import logging
import re
import uuid
from pathlib import Path
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from studybuddy.boundary.db.CRUD.document_crud import document_crud
from studybuddy.boundary.db.models.document_model import DocumentModel
from studybuddy.core.exceptions import DocumentNotFoundError, ValidationError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".pdf"}
MAX_FILE_SIZE = 25 * 1024 * 1024  # 25MB

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _write_file(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


class DocumentService:
    """Document metadata and upload storage."""

    def __init__(self, db: AsyncSession, upload_directory: str = "./data/uploads") -> None:
        """
        Initialize document service.

        Args:
            db: AsyncSession for document rows
            upload_directory: Directory where uploaded PDFs are kept
        """
        self.db = db
        self._upload_directory = Path(upload_directory)

    @staticmethod
    def validate_upload(filename: str | None, content: bytes) -> None:
        """
        Check extension and size of an uploaded file.

        Raises:
            ValidationError: Missing filename, wrong extension, empty or too large
        """
        if not filename:
            raise ValidationError("Filename is required", field="file")

        file_ext = Path(filename).suffix.lower()
        if file_ext not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                f"File type '{file_ext}' not allowed. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}",
                field="file",
            )
        if not content:
            raise ValidationError("Uploaded file is empty", field="file")
        if len(content) > MAX_FILE_SIZE:
            raise ValidationError(
                f"File too large. Maximum size: {MAX_FILE_SIZE // (1024 * 1024)}MB",
                field="file",
                details={"size": len(content)},
            )

    async def store_upload(self, filename: str, content: bytes) -> str:
        """
        Persist uploaded bytes under the upload directory.

        The write runs in a worker thread so large uploads do not block
        the event loop.

        Args:
            filename: Original filename
            content: File bytes

        Returns:
            str: Local path used as the document's source locator
        """
        safe_name = _UNSAFE_FILENAME_CHARS.sub("_", Path(filename).name)
        path = self._upload_directory / f"{uuid.uuid4().hex}_{safe_name}"
        await asyncio.to_thread(_write_file, path, content)
        logger.info(
            f"{__name__}:store_upload - Stored upload",
            extra={"path": str(path), "size": len(content)},
        )
        return str(path)

    async def discard_upload(self, source_url: str) -> None:
        """Remove a stored upload whose document row was never created."""
        await asyncio.to_thread(Path(source_url).unlink, missing_ok=True)
        logger.warning(
            f"{__name__}:discard_upload - Removed orphaned upload",
            extra={"path": source_url},
        )

    async def create_document(
        self,
        user_id: UUID,
        title: str,
        source_url: str,
        is_resume: bool = False,
        resume_metadata: dict[str, Any] | None = None,
    ) -> DocumentModel:
        """
        Create and commit a document row awaiting indexing.

        Returns:
            DocumentModel: Committed document (status processing)
        """
        document = await document_crud.create(
            self.db,
            user_id=user_id,
            title=title,
            source_url=source_url,
            is_resume=is_resume,
            resume_metadata=resume_metadata,
            chunks=[],
        )
        # Commit before scheduling so the background job can see the row
        await self.db.commit()
        logger.info(
            f"{__name__}:create_document - Document created",
            extra={"document_id": str(document.id), "is_resume": is_resume},
        )
        return document

    async def list_documents(
        self,
        user_id: UUID,
        is_resume: bool | None = None,
    ) -> Sequence[DocumentModel]:
        return await document_crud.get_by_user(self.db, user_id, is_resume=is_resume)

    async def get_document(self, document_id: UUID, user_id: UUID) -> DocumentModel:
        """
        Get a document owned by the user.

        Raises:
            DocumentNotFoundError: Missing or owned by someone else
        """
        document = await document_crud.get_owned(self.db, document_id, user_id)
        if document is None:
            raise DocumentNotFoundError(str(document_id))
        return document

    async def get_owned_ids(self, document_ids: Sequence[UUID], user_id: UUID) -> list[str]:
        """Filter ``document_ids`` down to those owned by the user, keeping order."""
        rows = await document_crud.get_by_ids(self.db, list(document_ids))
        owned = {row.id for row in rows if row.user_id == user_id}
        return [str(doc_id) for doc_id in document_ids if doc_id in owned]

    async def delete_document(self, document_id: UUID, user_id: UUID) -> None:
        """
        Delete an owned document together with its reviews.

        Raises:
            DocumentNotFoundError: Missing or owned by someone else
        """
        deleted = await document_crud.delete_document(self.db, document_id, user_id)
        if not deleted:
            raise DocumentNotFoundError(str(document_id))
        await self.db.commit()
        logger.info(
            f"{__name__}:delete_document - Document deleted",
            extra={"document_id": str(document_id)},
        )
