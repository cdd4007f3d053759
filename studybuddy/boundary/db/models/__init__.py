"""
Database models package.

Exports:
  - DocumentModel, DocumentStatus: Document ORM model and derived status enum
  - ResumeReviewModel: Resume review ORM model
  - ChatMessageModel, ChatRole: Stored chat turns per user and document

Dependencies: sqlalchemy, studybuddy.boundary.db.base
System role: Database model definitions for domain entities
"""

from studybuddy.boundary.db.models.chat_message_model import ChatMessageModel, ChatRole
from studybuddy.boundary.db.models.document_model import DocumentModel, DocumentStatus
from studybuddy.boundary.db.models.resume_review_model import ResumeReviewModel

__all__ = [
    "ChatMessageModel",
    "ChatRole",
    "DocumentModel",
    "DocumentStatus",
    "ResumeReviewModel",
]
