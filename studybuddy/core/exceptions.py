"""
Exception hierarchy for the StudyBuddy application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class StudyBuddyException(Exception):
    """Base exception for all StudyBuddy application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(StudyBuddyException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentNotFoundError(StudyBuddyException):
    """Raised when a document cannot be found or is not accessible."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Document not found: {document_id}", details)


class DocumentProcessingError(StudyBuddyException):
    """Base exception for document indexing errors."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_id: ID of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)


class FetchError(DocumentProcessingError):
    """Raised when the raw bytes of a document cannot be fetched."""

    def __init__(
        self,
        message: str,
        locator: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize fetch error.

        Args:
            message: Error message
            locator: URL, S3 URI or path that could not be read
            details: Additional context
        """
        details = details or {}
        if locator:
            details["locator"] = locator
        super().__init__(message, details=details)


class ExtractionError(DocumentProcessingError):
    """Raised when text extraction yields no usable text."""

    pass


class ChunkingConfigError(DocumentProcessingError, ValueError):
    """Raised when chunk size and overlap cannot produce a terminating window."""

    def __init__(self, chunk_size: int, overlap: int) -> None:
        super().__init__(
            f"Invalid chunking configuration: chunk_size={chunk_size}, overlap={overlap} "
            "(both must be positive and overlap < chunk_size)",
            details={"chunk_size": chunk_size, "overlap": overlap},
        )


class EmbeddingProviderError(StudyBuddyException):
    """Raised when the upstream embedding call fails."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)


class RetrievalError(StudyBuddyException):
    """Raised when retrieval operations fail."""

    pass


class NoContentError(RetrievalError):
    """Raised when none of the candidate documents has scorable chunks yet."""

    def __init__(
        self,
        document_ids: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize no-content error.

        Args:
            document_ids: Candidate document IDs that were searched
            details: Additional context
        """
        details = details or {}
        if document_ids is not None:
            details["document_ids"] = document_ids
        super().__init__(
            "No processed chunks available. Please wait for document processing to complete.",
            details,
        )


class GenerationError(StudyBuddyException):
    """Raised when the text generation model fails."""

    pass
