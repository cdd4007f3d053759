"""
Brute-force similarity retrieval over stored document chunks.

Embeds the query once, scores every embedded chunk of the candidate
documents and returns the best ``top_k``.

Dependencies: studybuddy.core.interfaces, numpy (via similarity)
System role: RAG retrieval business logic
"""

import logging
from collections.abc import Sequence

from studybuddy.core.document_processing.models import RetrievalResult
from studybuddy.core.exceptions import NoContentError, ValidationError
from studybuddy.core.interfaces import DocumentRepository, EmbeddingClient

from .similarity import cosine_similarity

logger = logging.getLogger(__name__)


class SimilarityRetriever:
    """Rank stored chunks by cosine similarity to a query."""

    def __init__(self, embedding_client: EmbeddingClient, repository: DocumentRepository) -> None:
        self._embedding_client = embedding_client
        self._repository = repository

    async def retrieve(
        self,
        query: str,
        document_ids: Sequence[str],
        top_k: int = 5,
    ) -> list[RetrievalResult]:
        """
        Retrieve the chunks most similar to ``query``.

        Args:
            query: Natural language question
            document_ids: Documents to search
            top_k: Maximum number of results

        Returns:
            list[RetrievalResult]: Results ordered by similarity, highest first

        Raises:
            ValidationError: When top_k < 1
            EmbeddingProviderError: Query embedding failed
            NoContentError: No candidate document has an embedded chunk
        """
        if top_k < 1:
            raise ValidationError("top_k must be at least 1", field="top_k")

        query_vector = await self._embedding_client.embed(query)
        documents = await self._repository.get_documents_by_ids(list(document_ids))

        scored: list[RetrievalResult] = []
        for document in documents:
            if not document.chunks:
                logger.warning(
                    f"{__name__}:retrieve - Document has no chunks, skipping",
                    extra={"document_id": document.id, "title": document.title},
                )
                continue

            for chunk in document.chunks:
                if not chunk.has_embedding:
                    continue
                try:
                    similarity = cosine_similarity(query_vector, chunk.embedding)
                except ValueError as e:
                    logger.warning(
                        f"{__name__}:retrieve - Skipping chunk with mismatched embedding",
                        extra={"document_id": document.id, "error_msg": str(e)},
                    )
                    continue
                scored.append(
                    RetrievalResult(
                        text=chunk.text,
                        page_number=chunk.page_number,
                        document_id=document.id,
                        document_title=document.title,
                        similarity=similarity,
                    )
                )

        if not scored:
            raise NoContentError(document_ids=[str(doc_id) for doc_id in document_ids])

        scored.sort(key=lambda result: result.similarity, reverse=True)
        logger.info(
            f"{__name__}:retrieve - Retrieved chunks",
            extra={
                "documents": len(documents),
                "scored": len(scored),
                "returned": min(top_k, len(scored)),
            },
        )
        return scored[:top_k]
