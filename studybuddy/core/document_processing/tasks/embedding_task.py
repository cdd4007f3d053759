"""
Embedding generation task.

Embeds chunk candidates in small concurrent batches with a pause between
batches to stay under provider rate limits.

Dependencies: asyncio, studybuddy.core.interfaces
System role: Third stage of document ingestion pipeline
"""

import asyncio
import logging

from studybuddy.core.exceptions import EmbeddingProviderError
from studybuddy.core.interfaces import EmbeddingClient
from studybuddy.observability.log_utils import log_with_context

from ..models import Chunk, ChunkCandidate

logger = logging.getLogger(__name__)

PROGRESS_LOG_INTERVAL = 10


class EmbeddingTask:
    """Generate embeddings for chunk candidates in throttled batches."""

    def __init__(
        self,
        client: EmbeddingClient,
        batch_size: int = 5,
        batch_delay_seconds: float = 1.0,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            client: Embedding provider adapter
            batch_size: Requests issued concurrently per batch
            batch_delay_seconds: Pause after each batch except the last

        Raises:
            ValueError: When batch_size < 1 or delay is negative
        """
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        if batch_delay_seconds < 0:
            raise ValueError("batch_delay_seconds cannot be negative")
        self._client = client
        self._batch_size = batch_size
        self._batch_delay = batch_delay_seconds

    async def embed_candidates(self, candidates: list[ChunkCandidate]) -> list[Chunk]:
        """
        Embed candidates, dropping any whose embedding call fails.

        Args:
            candidates: Chunk candidates in document order

        Returns:
            list[Chunk]: Embedded chunks in candidate order
        """
        chunks: list[Chunk] = []
        total = len(candidates)
        processed = 0

        for start in range(0, total, self._batch_size):
            batch = candidates[start:start + self._batch_size]
            results = await asyncio.gather(*(self._embed_one(c) for c in batch))

            for chunk in results:
                processed += 1
                if chunk is not None:
                    chunks.append(chunk)
                if processed % PROGRESS_LOG_INTERVAL == 0:
                    logger.info(
                        f"{__name__}:embed_candidates - Embedding progress",
                        extra={"processed": processed, "total": total},
                    )

            if start + self._batch_size < total:
                await asyncio.sleep(self._batch_delay)

        if len(chunks) < total:
            logger.warning(
                f"{__name__}:embed_candidates - Dropped chunks with failed embeddings",
                extra={"dropped": total - len(chunks), "total": total},
            )
        return chunks

    async def _embed_one(self, candidate: ChunkCandidate) -> Chunk | None:
        try:
            vector = await self._client.embed(candidate.text)
        except EmbeddingProviderError as e:
            log_with_context(
                logger,
                logging.ERROR,
                f"{__name__}:_embed_one - Embedding failed, dropping chunk",
                page_number=candidate.page_number,
                text_preview=candidate.text[:80],
                error_type=type(e).__name__,
                error_msg=e.message,
            )
            return None
        return Chunk(text=candidate.text, page_number=candidate.page_number, embedding=vector)
