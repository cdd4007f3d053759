"""
Document indexing pipeline.

Fetches, parses, chunks and embeds documents, then hands the chunk list
to the document repository. The orchestrator lives in
``studybuddy.core.document_processing.entrypoint``.

Dependencies: langchain_community, langchain_google_genai, httpx, boto3, pydantic
System role: Document ingestion pipeline
"""

from .configs import RAGSettings, get_rag_settings
from .models import Chunk, ChunkCandidate, ExtractedText, IndexingResult

__all__ = [
    "RAGSettings",
    "get_rag_settings",
    "Chunk",
    "ChunkCandidate",
    "ExtractedText",
    "IndexingResult",
]
