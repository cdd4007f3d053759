"""
Dependency injection container.

Factory functions for FastAPI dependencies. Process-wide collaborators
(embedding client, indexer, retriever, LLM) are built lazily and cached.

Dependencies: studybuddy.configs, studybuddy.application, studybuddy.boundary, studybuddy.core
System role: DI container for service injection
"""

from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from studybuddy.application.adapters import ChatHistoryAdapter, GeminiTextGenerator
from studybuddy.application.services import ChatService, DocumentService, IndexingService, ResumeService
from studybuddy.boundary.db import (
    SQLDocumentRepository,
    SQLReviewRepository,
    get_async_db,
    get_async_session_factory,
)
from studybuddy.configs import get_settings
from studybuddy.core.document_processing.embeddings_wrapper import GeminiEmbeddingClient
from studybuddy.core.document_processing.entrypoint import DocumentIndexer
from studybuddy.core.interfaces import TextGenerator
from studybuddy.core.retrieval import ResumeContextAssembler, SimilarityRetriever


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._embedding_client = None
        self._document_repository = None
        self._review_repository = None
        self._indexing_service = None
        self._retriever = None
        self._text_generator = None

    @property
    def embedding_client(self) -> GeminiEmbeddingClient:
        if self._embedding_client is None:
            rag = get_settings().rag
            self._embedding_client = GeminiEmbeddingClient(
                model=rag.embedding_model,
                output_dimensionality=rag.embedding_dimension,
                google_api_key=rag.google_api_key or None,
            )
        return self._embedding_client

    @property
    def document_repository(self) -> SQLDocumentRepository:
        if self._document_repository is None:
            self._document_repository = SQLDocumentRepository(get_async_session_factory())
        return self._document_repository

    @property
    def review_repository(self) -> SQLReviewRepository:
        if self._review_repository is None:
            self._review_repository = SQLReviewRepository(get_async_session_factory())
        return self._review_repository

    @property
    def indexing_service(self) -> IndexingService:
        """Get cached indexing service (owns the in-flight document set)."""
        if self._indexing_service is None:
            indexer = DocumentIndexer.from_settings(self.document_repository, get_settings().rag)
            self._indexing_service = IndexingService(indexer)
        return self._indexing_service

    @property
    def retriever(self) -> SimilarityRetriever:
        if self._retriever is None:
            self._retriever = SimilarityRetriever(self.embedding_client, self.document_repository)
        return self._retriever

    @property
    def text_generator(self) -> GeminiTextGenerator:
        if self._text_generator is None:
            rag = get_settings().rag
            self._text_generator = GeminiTextGenerator(
                model_id=rag.chat_model,
                temperature=rag.chat_temperature,
                google_api_key=rag.google_api_key or None,
            )
        return self._text_generator

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedding_client = None
        self._document_repository = None
        self._review_repository = None
        self._indexing_service = None
        self._retriever = None
        self._text_generator = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> UUID:
    """
    Resolve the requesting user from the X-User-Id header.

    Raises:
        HTTPException(401): Header missing or not a UUID
    """
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="X-User-Id header is required")
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="X-User-Id must be a UUID")


def get_document_service(db: AsyncSession = Depends(get_async_db)) -> DocumentService:
    """
    Get document service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        DocumentService: Document service bound to the request session
    """
    return DocumentService(db=db, upload_directory=get_settings().rag.upload_directory)


def get_indexing_service() -> IndexingService:
    return get_service_cache().indexing_service


def get_retriever() -> SimilarityRetriever:
    return get_service_cache().retriever


def get_text_generator() -> TextGenerator:
    return get_service_cache().text_generator


def get_review_repository() -> SQLReviewRepository:
    return get_service_cache().review_repository


def get_chat_history_adapter(db: AsyncSession = Depends(get_async_db)) -> ChatHistoryAdapter:
    return ChatHistoryAdapter(db=db)


def get_chat_service(
    document_service: DocumentService = Depends(get_document_service),
    retriever: SimilarityRetriever = Depends(get_retriever),
    generator: TextGenerator = Depends(get_text_generator),
    history: ChatHistoryAdapter = Depends(get_chat_history_adapter),
) -> ChatService:
    """
    Get chat service instance.

    Returns:
        ChatService: Chat service with retriever, Gemini generator and chat history
    """
    return ChatService(
        document_service=document_service,
        retriever=retriever,
        generator=generator,
        history=history,
        default_top_k=get_settings().rag.default_top_k,
    )


def get_resume_service(
    document_service: DocumentService = Depends(get_document_service),
    retriever: SimilarityRetriever = Depends(get_retriever),
    review_repository: SQLReviewRepository = Depends(get_review_repository),
) -> ResumeService:
    return ResumeService(
        document_service=document_service,
        assembler=ResumeContextAssembler(retriever, review_repository),
        default_top_k=get_settings().rag.default_top_k,
    )
