"""API-specific dependencies."""

from .dependencies import (
    get_chat_service,
    get_current_user_id,
    get_document_service,
    get_indexing_service,
    get_resume_service,
    get_retriever,
    get_review_repository,
    get_service_cache,
    get_text_generator,
)

__all__ = [
    "get_chat_service",
    "get_current_user_id",
    "get_document_service",
    "get_indexing_service",
    "get_resume_service",
    "get_retriever",
    "get_review_repository",
    "get_service_cache",
    "get_text_generator",
]
