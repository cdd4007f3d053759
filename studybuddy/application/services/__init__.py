"""Service orchestrators."""

from .chat_service import ChatService
from .document_service import DocumentService
from .indexing_service import IndexingService
from .resume_service import ResumeService

__all__ = [
    "ChatService",
    "DocumentService",
    "IndexingService",
    "ResumeService",
]
