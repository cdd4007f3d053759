"""
Document API endpoints.

Routes:
- POST /documents - Upload a course PDF and index it in the background
- POST /documents/resumes - Upload a resume with its context
- GET /documents - List the user's documents
- GET /documents/{id} - Document detail with indexing status
- DELETE /documents/{id} - Delete document with its reviews and chat history
- POST /documents/{id}/reindex - Re-index from the stored source

Dependencies: studybuddy.application.services, studybuddy.models
System role: Document HTTP API
"""

import logging
from pathlib import Path
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, HTTPException, UploadFile, status

from studybuddy.api.deps import get_current_user_id, get_document_service, get_indexing_service
from studybuddy.application.services import DocumentService, IndexingService
from studybuddy.boundary.db.models.document_model import DocumentModel, DocumentStatus
from studybuddy.models.document import (
    DocumentListResponse,
    DocumentResponse,
    ReindexResponse,
    ResumeMetadata,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


def to_document_response(document: DocumentModel, indexing: bool = False) -> DocumentResponse:
    """Map a row to its API schema; a running job reports processing over the stored status."""
    return DocumentResponse(
        id=document.id,
        title=document.title,
        status=DocumentStatus.PROCESSING.value if indexing else document.status.value,
        indexing_in_progress=indexing,
        is_resume=document.is_resume,
        total_pages=document.total_pages,
        chunk_count=document.chunk_count,
        processing_error=document.processing_error,
        resume_metadata=ResumeMetadata(**document.resume_metadata) if document.resume_metadata else None,
        created_at=document.created_at,
        updated_at=document.updated_at,
    )


async def _upload(
    file: UploadFile,
    title: str | None,
    user_id: UUID,
    background_tasks: BackgroundTasks,
    document_service: DocumentService,
    indexing_service: IndexingService,
    resume_metadata: ResumeMetadata | None = None,
) -> DocumentResponse:
    content = await file.read()
    document_service.validate_upload(file.filename, content)

    source_url = await document_service.store_upload(file.filename, content)
    try:
        document = await document_service.create_document(
            user_id=user_id,
            title=title or Path(file.filename).stem,
            source_url=source_url,
            is_resume=resume_metadata is not None,
            resume_metadata=resume_metadata.model_dump() if resume_metadata else None,
        )
    except Exception:
        await document_service.discard_upload(source_url)
        raise

    await indexing_service.schedule(background_tasks, str(document.id), source_url, raw_bytes=content)
    return to_document_response(document)


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def upload_document(
    background_tasks: BackgroundTasks,
    file: UploadFile = File(...),
    title: str | None = Form(default=None),
    user_id: UUID = Depends(get_current_user_id),
    document_service: DocumentService = Depends(get_document_service),
    indexing_service: IndexingService = Depends(get_indexing_service),
) -> DocumentResponse:
    """
    Upload a course PDF (non-blocking).

    Stores the file, creates the document row and queues indexing with the
    uploaded bytes. Poll GET /documents/{id} for status.

    Raises:
        HTTPException(400): Missing filename, wrong type, empty or too large
    """
    logger.info("Document upload request received", extra={"document_name": file.filename})
    return await _upload(file, title, user_id, background_tasks, document_service, indexing_service)


@router.post("/resumes", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def upload_resume(
    background_tasks: BackgroundTasks,
    file: UploadFile = File(...),
    title: str | None = Form(default=None),
    target_role: str | None = Form(default=None),
    industry: str | None = Form(default=None),
    years_of_experience: int | None = Form(default=None, ge=0),
    additional_context: str | None = Form(default=None),
    user_id: UUID = Depends(get_current_user_id),
    document_service: DocumentService = Depends(get_document_service),
    indexing_service: IndexingService = Depends(get_indexing_service),
) -> DocumentResponse:
    """Upload a resume PDF together with its review context."""
    logger.info("Resume upload request received", extra={"document_name": file.filename})
    metadata = ResumeMetadata(
        target_role=target_role,
        industry=industry,
        years_of_experience=years_of_experience,
        additional_context=additional_context,
    )
    return await _upload(
        file, title, user_id, background_tasks, document_service, indexing_service, resume_metadata=metadata
    )


@router.get("", response_model=DocumentListResponse)
@handle_service_errors
async def list_documents(
    is_resume: bool | None = None,
    user_id: UUID = Depends(get_current_user_id),
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentListResponse:
    """List the user's documents, newest first (no chunk data)."""
    documents = [to_document_response(doc) for doc in await document_service.list_documents(user_id, is_resume)]
    return DocumentListResponse(documents=documents, total=len(documents))


@router.get("/{document_id}", response_model=DocumentResponse)
@handle_service_errors
async def get_document(
    document_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    document_service: DocumentService = Depends(get_document_service),
    indexing_service: IndexingService = Depends(get_indexing_service),
) -> DocumentResponse:
    """
    Get a document with its indexing status.

    While a job for the document is running in this process the status is
    "processing", even if an earlier run failed or left chunks.

    Raises:
        HTTPException(404): Document not found or not owned
    """
    document = await document_service.get_document(document_id, user_id)
    indexing = await indexing_service.is_in_flight(str(document.id))
    return to_document_response(document, indexing=indexing)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_document(
    document_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    document_service: DocumentService = Depends(get_document_service),
) -> None:
    """
    Delete a document; its chunks and reviews go with it.

    Raises:
        HTTPException(404): Document not found or not owned
    """
    await document_service.delete_document(document_id, user_id)


@router.post("/{document_id}/reindex", response_model=ReindexResponse, status_code=status.HTTP_202_ACCEPTED)
@handle_service_errors
async def reindex_document(
    document_id: UUID,
    background_tasks: BackgroundTasks,
    user_id: UUID = Depends(get_current_user_id),
    document_service: DocumentService = Depends(get_document_service),
    indexing_service: IndexingService = Depends(get_indexing_service),
) -> ReindexResponse:
    """
    Re-index a document from its stored source locator.

    Raises:
        HTTPException(404): Document not found or not owned
        HTTPException(409): Indexing already in progress
    """
    document = await document_service.get_document(document_id, user_id)
    queued = await indexing_service.schedule(background_tasks, str(document.id), document.source_url)
    if not queued:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Indexing already in progress")

    logger.info("Re-index queued", extra={"document_id": str(document_id)})
    return ReindexResponse(
        document_id=document.id,
        status="processing",
        message="Re-indexing started. Poll GET /documents/{id} for status.",
    )
