"""
Similarity retrieval and resume context assembly.

Exports: SimilarityRetriever, ResumeContextAssembler, cosine_similarity
"""

from .resume_context import ResumeContextAssembler
from .retriever import SimilarityRetriever
from .similarity import cosine_similarity

__all__ = ["SimilarityRetriever", "ResumeContextAssembler", "cosine_similarity"]
