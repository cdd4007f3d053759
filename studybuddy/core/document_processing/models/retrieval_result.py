"""
Retrieval result model.

Ephemeral, created per query and never persisted.

Dependencies: pydantic
System role: Return type for SimilarityRetriever.retrieve()
"""

from pydantic import BaseModel, Field


class RetrievalResult(BaseModel):
    """A scored chunk returned by similarity retrieval."""

    text: str
    page_number: int
    document_id: str
    document_title: str
    similarity: float = Field(description="Cosine similarity to the query (not clamped)")

    def snippet(self, length: int = 200) -> str:
        """Return the first ``length`` characters for citations."""
        if len(self.text) <= length:
            return self.text
        return self.text[:length] + "..."
