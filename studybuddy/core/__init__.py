"""
Core business logic module.

Contains the indexing pipeline, similarity retrieval, resume context
assembly and the exception hierarchy. Infrastructure is reached only
through the protocols in ``studybuddy.core.interfaces``.
"""

from studybuddy.core.exceptions import (
    ChunkingConfigError,
    DocumentNotFoundError,
    DocumentProcessingError,
    EmbeddingProviderError,
    ExtractionError,
    FetchError,
    GenerationError,
    NoContentError,
    RetrievalError,
    StudyBuddyException,
    ValidationError,
)

__all__ = [
    "StudyBuddyException",
    "ValidationError",
    "DocumentNotFoundError",
    "DocumentProcessingError",
    "FetchError",
    "ExtractionError",
    "ChunkingConfigError",
    "EmbeddingProviderError",
    "RetrievalError",
    "NoContentError",
    "GenerationError",
]
