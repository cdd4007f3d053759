"""
Indexing service.

Schedules document indexing as FastAPI background tasks and keeps at most
one in-flight job per document within this process.

Dependencies: fastapi, studybuddy.core.document_processing
System role: Background indexing orchestration
"""

import asyncio
import logging

from fastapi import BackgroundTasks

from studybuddy.core.document_processing.entrypoint import DocumentIndexer
from studybuddy.core.document_processing.models import IndexingResult

logger = logging.getLogger(__name__)


class IndexingService:
    """Run DocumentIndexer jobs in the background, one per document."""

    def __init__(self, indexer: DocumentIndexer) -> None:
        self._indexer = indexer
        self._in_flight: set[str] = set()
        self._lock = asyncio.Lock()

    async def is_in_flight(self, document_id: str) -> bool:
        async with self._lock:
            return str(document_id) in self._in_flight

    async def schedule(
        self,
        background_tasks: BackgroundTasks,
        document_id: str,
        source_locator: str,
        raw_bytes: bytes | None = None,
    ) -> bool:
        """
        Queue an indexing job unless one is already running for the document.

        Args:
            background_tasks: Request-scoped FastAPI background task list
            document_id: Document to index
            source_locator: URL, s3:// URI or path of the raw PDF
            raw_bytes: Uploaded bytes, skips the fetch stage when given

        Returns:
            bool: True if queued, False if the document is already being indexed
        """
        document_id = str(document_id)
        async with self._lock:
            if document_id in self._in_flight:
                logger.warning(
                    f"{__name__}:schedule - Indexing already in progress, skipping",
                    extra={"document_id": document_id},
                )
                return False
            self._in_flight.add(document_id)

        background_tasks.add_task(self.run, document_id, source_locator, raw_bytes)
        logger.info(
            f"{__name__}:schedule - Indexing queued",
            extra={"document_id": document_id, "source": source_locator},
        )
        return True

    async def run(
        self,
        document_id: str,
        source_locator: str,
        raw_bytes: bytes | None = None,
    ) -> IndexingResult | None:
        """
        Execute one indexing job and release the document afterwards.

        Failures are already recorded on the document by the indexer, so
        they end the job here instead of propagating into the server.

        Returns:
            IndexingResult | None: Result, or None if indexing failed
        """
        document_id = str(document_id)
        try:
            return await self._indexer.index(document_id, source_locator, raw_bytes)
        except Exception as e:
            logger.warning(
                f"{__name__}:run - Indexing job ended with error",
                extra={
                    "document_id": document_id,
                    "error_type": type(e).__name__,
                    "error_msg": str(e),
                },
            )
            return None
        finally:
            async with self._lock:
                self._in_flight.discard(document_id)
