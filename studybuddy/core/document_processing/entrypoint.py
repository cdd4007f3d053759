"""
Document indexing orchestrator.

Coordinates fetch, extraction, chunking, embedding and persistence for a
single document. On failure the error is recorded on the document and the
original exception is re-raised; no partial chunk list is ever written.

Dependencies: All task modules, studybuddy.core.interfaces
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from studybuddy.core.interfaces import ByteFetcher, DocumentRepository, TextExtractor
from studybuddy.observability.log_utils import log_exception_with_context

from .configs import RAGSettings, get_rag_settings
from .embeddings_wrapper import GeminiEmbeddingClient
from .models import IndexingResult
from .tasks import ChunkingTask, EmbeddingTask, FetchTask, ParsingTask

logger = logging.getLogger(__name__)


class DocumentIndexer:
    """Orchestrate indexing: fetch -> extract -> chunk -> embed -> save."""

    def __init__(
        self,
        fetcher: ByteFetcher,
        extractor: TextExtractor,
        chunking_task: ChunkingTask,
        embedding_task: EmbeddingTask,
        repository: DocumentRepository,
    ) -> None:
        self._fetcher = fetcher
        self._extractor = extractor
        self._chunking_task = chunking_task
        self._embedding_task = embedding_task
        self._repository = repository

    @classmethod
    def from_settings(
        cls,
        repository: DocumentRepository,
        settings: RAGSettings | None = None,
    ) -> "DocumentIndexer":
        """
        Build an indexer wired to the Gemini embedding client.

        Args:
            repository: Document repository used to persist results
            settings: Pipeline settings (uses cached defaults if None)

        Returns:
            DocumentIndexer: Ready-to-use indexer
        """
        settings = settings or get_rag_settings()
        client = GeminiEmbeddingClient(
            model=settings.embedding_model,
            output_dimensionality=settings.embedding_dimension,
            google_api_key=settings.google_api_key or None,
        )
        return cls(
            fetcher=FetchTask(
                timeout_seconds=settings.fetch_timeout_seconds,
                s3_region=settings.s3_region,
            ),
            extractor=ParsingTask(),
            chunking_task=ChunkingTask(
                chunk_size=settings.page_chunk_size,
                chunk_overlap=settings.page_chunk_overlap,
                min_chunk_length=settings.min_chunk_length,
            ),
            embedding_task=EmbeddingTask(
                client,
                batch_size=settings.embedding_batch_size,
                batch_delay_seconds=settings.embedding_batch_delay_seconds,
            ),
            repository=repository,
        )

    async def index(
        self,
        document_id: str,
        source_locator: str,
        raw_bytes: bytes | None = None,
    ) -> IndexingResult:
        """
        Index one document and replace its stored chunks.

        Args:
            document_id: Document to index
            source_locator: URL, s3:// URI or path used when raw_bytes is None
            raw_bytes: Already-available document bytes

        Returns:
            IndexingResult: Chunk count and page count

        Raises:
            FetchError: Source could not be fetched
            ExtractionError: No text could be extracted
            EmbeddingProviderError: Propagated from a misbehaving client
            Exception: Any persistence failure, after being recorded
        """
        start_time = time.perf_counter()
        logger.info(
            f"{__name__}:index - Starting indexing",
            extra={"document_id": document_id, "source": source_locator},
        )

        try:
            data = raw_bytes if raw_bytes is not None else await self._fetcher.fetch(source_locator)
            extracted = await self._extractor.extract(data)
            candidates = self._chunking_task.chunk(extracted.text, extracted.page_count)
            chunks = await self._embedding_task.embed_candidates(candidates)
            await self._repository.update_document_chunks(document_id, chunks, extracted.page_count)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:index - Indexing failed",
                e,
                document_id=document_id,
                source=source_locator,
            )
            await self._record_error(document_id, e)
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        if not chunks:
            logger.warning(
                f"{__name__}:index - Indexing produced no chunks",
                extra={"document_id": document_id, "candidates": len(candidates)},
            )

        logger.info(
            f"{__name__}:index - Indexing complete",
            extra={
                "document_id": document_id,
                "chunk_count": len(chunks),
                "total_pages": extracted.page_count,
                "elapsed_ms": round(elapsed_ms, 1),
            },
        )
        return IndexingResult(
            document_id=document_id,
            chunk_count=len(chunks),
            total_pages=extracted.page_count,
            dropped_chunks=len(candidates) - len(chunks),
            processing_time_ms=elapsed_ms,
        )

    async def _record_error(self, document_id: str, error: Exception) -> None:
        message = getattr(error, "message", None) or str(error)
        try:
            await self._repository.set_document_error(document_id, message)
        except Exception as record_error:
            log_exception_with_context(
                logger,
                f"{__name__}:_record_error - Could not record processing error",
                record_error,
                document_id=document_id,
            )
