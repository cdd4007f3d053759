"""
Collaborator interfaces for the indexing and retrieval core.

The indexer and retriever receive these collaborators through their
constructors; concrete implementations live in the boundary layer.

Dependencies: typing
System role: Ports between core logic and infrastructure
"""

from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel, Field

from studybuddy.core.document_processing.models import Chunk, ExtractedText, ReviewSummary


class StoredDocument(BaseModel):
    """Document row as seen by the retriever."""

    id: str
    title: str
    chunks: list[Chunk] = Field(default_factory=list)


class ByteFetcher(Protocol):
    async def fetch(self, locator: str) -> bytes: ...


class TextExtractor(Protocol):
    async def extract(self, data: bytes) -> ExtractedText: ...


class EmbeddingClient(Protocol):
    async def embed(self, text: str) -> list[float]: ...


class DocumentRepository(Protocol):
    async def get_documents_by_ids(self, document_ids: Sequence[str]) -> list[StoredDocument]: ...

    async def update_document_chunks(
        self,
        document_id: str,
        chunks: Sequence[Chunk],
        total_pages: int,
    ) -> None: ...

    async def set_document_error(self, document_id: str, message: str) -> None: ...


class ReviewRepository(Protocol):
    async def get_latest_review(self, document_id: str, user_id: str) -> ReviewSummary | None: ...


class TextGenerator(Protocol):
    async def complete(self, prompt: str) -> str: ...
