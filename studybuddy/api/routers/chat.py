"""
Chat API endpoints.

Routes:
- POST /chat - Answer a question grounded in the user's documents
- GET /chat/history/{document_id} - Stored conversation for a document
- DELETE /chat/history/{document_id} - Clear the stored conversation

Dependencies: studybuddy.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from studybuddy.api.deps import get_chat_service, get_current_user_id
from studybuddy.application.services import ChatService
from studybuddy.models.chat import ChatHistoryResponse, ChatRequest, ChatResponse

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
@handle_service_errors
async def chat(
    request: ChatRequest,
    user_id: UUID = Depends(get_current_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """
    Answer a question with page citations.

    Raises:
        HTTPException(404): None of the documents belongs to the user
        HTTPException(409): Documents are still being processed
        HTTPException(502): Embedding or generation provider failed
    """
    logger.info(
        "Chat request received",
        extra={"documents": len(request.document_ids), "message_len": len(request.message)},
    )
    return await chat_service.process_chat(
        user_id=user_id,
        document_ids=request.document_ids,
        message=request.message,
        top_k=request.top_k,
    )


@router.get("/history/{document_id}", response_model=ChatHistoryResponse)
@handle_service_errors
async def get_chat_history(
    document_id: UUID,
    limit: int | None = Query(default=None, ge=1, le=500),
    user_id: UUID = Depends(get_current_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatHistoryResponse:
    """
    Get the stored conversation for a document, oldest message first.

    An owned document without history returns an empty message list.

    Raises:
        HTTPException(404): Document not found or not owned
    """
    return await chat_service.get_history(user_id, document_id, limit=limit)


@router.delete("/history/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def clear_chat_history(
    document_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> None:
    """
    Clear the stored conversation for a document.

    Raises:
        HTTPException(404): Document not found or not owned
    """
    deleted = await chat_service.clear_history(user_id, document_id)
    logger.info("Chat history cleared", extra={"document_id": str(document_id), "deleted": deleted})
