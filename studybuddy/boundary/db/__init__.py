"""
Database boundary layer: ORM models, CRUD operations, repositories and
connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(), create_tables()
  - DocumentModel, DocumentStatus, ResumeReviewModel, ChatMessageModel, ChatRole
  - document_crud, resume_review_crud, chat_message_crud: CRUD operation singletons
  - SQLDocumentRepository, SQLReviewRepository: Core protocol implementations

Dependencies: sqlalchemy, studybuddy.configs
System role: Database adapter for documents, chunks, resume reviews and chat history
"""

from studybuddy.boundary.db.base import Base, TimestampMixin, UUIDMixin
from studybuddy.boundary.db.connection import (
    create_tables,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from studybuddy.boundary.db.models import (
    ChatMessageModel,
    ChatRole,
    DocumentModel,
    DocumentStatus,
    ResumeReviewModel,
)
from studybuddy.boundary.db.CRUD import (
    BaseCRUD,
    ChatMessageCRUD,
    DocumentCRUD,
    ResumeReviewCRUD,
    chat_message_crud,
    document_crud,
    resume_review_crud,
)
from studybuddy.boundary.db.repositories import SQLDocumentRepository, SQLReviewRepository

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "create_tables",
    # Models
    "DocumentModel",
    "DocumentStatus",
    "ResumeReviewModel",
    "ChatMessageModel",
    "ChatRole",
    # CRUD
    "BaseCRUD",
    "ChatMessageCRUD",
    "chat_message_crud",
    "DocumentCRUD",
    "ResumeReviewCRUD",
    "document_crud",
    "resume_review_crud",
    # Repositories
    "SQLDocumentRepository",
    "SQLReviewRepository",
]
