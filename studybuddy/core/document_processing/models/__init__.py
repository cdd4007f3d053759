"""
Models for the indexing and retrieval pipeline.

Exports: ChunkCandidate, Chunk, ExtractedText, IndexingResult, RetrievalResult,
ReviewSummary, ResumeReviewContext
"""

from .chunk import Chunk, ChunkCandidate
from .extracted_text import ExtractedText
from .indexing_result import IndexingResult
from .retrieval_result import RetrievalResult
from .review import ResumeReviewContext, ReviewSummary

__all__ = [
    "ChunkCandidate",
    "Chunk",
    "ExtractedText",
    "IndexingResult",
    "RetrievalResult",
    "ReviewSummary",
    "ResumeReviewContext",
]
