"""
Indexing result model.

Dependencies: pydantic
System role: Return type for DocumentIndexer.index()
"""

from pydantic import BaseModel, Field


class IndexingResult(BaseModel):
    """Outcome of indexing one document."""

    document_id: str = Field(description="Indexed document identifier")
    success: bool = Field(default=True, description="True when chunks were persisted")
    chunk_count: int = Field(ge=0, description="Number of chunks persisted")
    total_pages: int = Field(ge=0, description="Page count reported by extraction")
    dropped_chunks: int = Field(
        default=0,
        ge=0,
        description="Candidates dropped because their embedding failed",
    )
    processing_time_ms: float = Field(default=0.0, description="Wall time in milliseconds")
