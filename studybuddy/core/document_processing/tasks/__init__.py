"""
Task modules for document indexing pipeline.

Exports: FetchTask, ParsingTask, ChunkingTask, EmbeddingTask, chunk helpers
"""

from .chunking_task import ChunkingTask, build_page_chunks, chunk_text, split_into_pages
from .embedding_task import EmbeddingTask
from .fetch_task import FetchTask
from .parsing_task import ParsingTask

__all__ = [
    "FetchTask",
    "ParsingTask",
    "ChunkingTask",
    "EmbeddingTask",
    "chunk_text",
    "split_into_pages",
    "build_page_chunks",
]
