"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from studybuddy.boundary.db.CRUD import document_crud

    document = await document_crud.get_by_id(db, document_id)
"""

from studybuddy.boundary.db.CRUD.base_crud import BaseCRUD
from studybuddy.boundary.db.CRUD.chat_message_crud import ChatMessageCRUD, chat_message_crud
from studybuddy.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from studybuddy.boundary.db.CRUD.resume_review_crud import ResumeReviewCRUD, resume_review_crud

__all__ = [
    "BaseCRUD",
    "ChatMessageCRUD",
    "chat_message_crud",
    "DocumentCRUD",
    "document_crud",
    "ResumeReviewCRUD",
    "resume_review_crud",
]
