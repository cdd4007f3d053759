"""
Chunk domain models for the indexing pipeline.

A ChunkCandidate is produced by the chunker; a Chunk is a candidate that
went through the embedding stage and is ready to persist.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion and retrieval
"""

from pydantic import BaseModel, Field


class ChunkCandidate(BaseModel):
    """Trimmed chunk text tagged with its approximate page."""

    text: str = Field(min_length=1, description="Trimmed chunk text")
    page_number: int = Field(ge=1, description="1-based page number (approximate)")


class Chunk(BaseModel):
    """Stored document chunk with optional embedding vector."""

    text: str = Field(description="Chunk text content")
    page_number: int = Field(ge=1, description="1-based page number (approximate)")
    embedding: list[float] | None = Field(default=None, description="Embedding vector")

    @property
    def has_embedding(self) -> bool:
        """True when the chunk carries a non-empty vector."""
        return bool(self.embedding)
