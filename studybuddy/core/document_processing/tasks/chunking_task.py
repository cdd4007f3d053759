"""
Text chunking task.

Splits extracted document text into overlapping fixed-size windows.
Pages are apportioned by character offset (text length / page count)
because generic PDF text extraction does not keep page boundaries.

Dependencies: studybuddy.core.exceptions
System role: Second stage of document ingestion pipeline
"""

from studybuddy.core.exceptions import ChunkingConfigError

from ..models import ChunkCandidate


def chunk_text(text: str, chunk_size: int = 1000, overlap: int = 200) -> list[str]:
    """
    Split text into fixed-size windows that repeat ``overlap`` characters.

    Args:
        text: Text to split
        chunk_size: Maximum chunk length in characters
        overlap: Characters each window repeats from the previous one

    Returns:
        list[str]: Windows in order; the last one may be shorter

    Raises:
        ChunkingConfigError: When sizes are not positive or overlap >= chunk_size
    """
    if chunk_size <= 0 or overlap <= 0 or overlap >= chunk_size:
        raise ChunkingConfigError(chunk_size, overlap)

    step = chunk_size - overlap
    chunks = []
    start = 0
    while start < len(text):
        chunks.append(text[start:start + chunk_size])
        start += step
    return chunks


def split_into_pages(text: str, total_pages: int) -> list[str]:
    """
    Apportion text to pages by character ratio.

    Page ``i`` covers ``text[floor(i * L / P):floor((i + 1) * L / P)]``.

    Args:
        text: Whole-document text
        total_pages: Page count reported by extraction (values < 1 count as 1)

    Returns:
        list[str]: One segment per page, concatenating back to ``text``
    """
    pages = max(total_pages, 1)
    length = len(text)
    return [
        text[(i * length) // pages:((i + 1) * length) // pages]
        for i in range(pages)
    ]


def build_page_chunks(
    text: str,
    total_pages: int,
    chunk_size: int = 800,
    overlap: int = 100,
    min_chunk_length: int = 50,
) -> list[ChunkCandidate]:
    """
    Chunk each apportioned page and filter short fragments.

    Args:
        text: Whole-document text
        total_pages: Page count from extraction
        chunk_size: Maximum chunk size per page
        overlap: Overlap between consecutive chunks of a page
        min_chunk_length: Trimmed chunks shorter than this are dropped

    Returns:
        list[ChunkCandidate]: Candidates ordered by page, then offset
    """
    candidates = []
    for index, page_text in enumerate(split_into_pages(text, total_pages)):
        if not page_text.strip():
            continue
        for window in chunk_text(page_text, chunk_size, overlap):
            trimmed = window.strip()
            if len(trimmed) < min_chunk_length:
                continue
            candidates.append(ChunkCandidate(text=trimmed, page_number=index + 1))
    return candidates


class ChunkingTask:
    """Produce page-tagged chunk candidates from extracted text."""

    def __init__(
        self,
        chunk_size: int = 800,
        chunk_overlap: int = 100,
        min_chunk_length: int = 50,
    ) -> None:
        """
        Initialize chunking task with window configuration.

        Args:
            chunk_size: Maximum chunk size in characters (per page)
            chunk_overlap: Overlap between consecutive chunks
            min_chunk_length: Trimmed chunks shorter than this are dropped

        Raises:
            ChunkingConfigError: When the window can never advance
        """
        if chunk_size <= 0 or chunk_overlap <= 0 or chunk_overlap >= chunk_size:
            raise ChunkingConfigError(chunk_size, chunk_overlap)
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap
        self._min_chunk_length = min_chunk_length

    def chunk(self, text: str, total_pages: int) -> list[ChunkCandidate]:
        """Run ``build_page_chunks`` with this task's window settings."""
        return build_page_chunks(
            text,
            total_pages,
            chunk_size=self._chunk_size,
            overlap=self._chunk_overlap,
            min_chunk_length=self._min_chunk_length,
        )
