"""
Citation model.

Represents a page citation for a grounded answer.

Dependencies: pydantic
System role: Citation data structure
"""

from pydantic import BaseModel, Field


class Citation(BaseModel):
    """Citation model for source attribution."""

    document_id: str = Field(description="Source document ID")
    document_title: str = Field(description="Source document title")
    page_number: int = Field(description="Approximate page number in source")
    snippet: str = Field(description="First 200 characters of the cited chunk")
    similarity: float = Field(description="Cosine similarity to the question")
