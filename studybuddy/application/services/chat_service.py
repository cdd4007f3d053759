"""
Chat service for grounded Q&A over uploaded documents.

Flow: ownership check -> similarity retrieval -> cited prompt -> LLM ->
answer with page citations -> chat history. Also reads and clears the
stored conversation for a document.

Dependencies: studybuddy.core.retrieval, studybuddy.application.services.document_service,
    studybuddy.application.adapters.chat_history_adapter
System role: Chat service orchestration layer
"""

import logging
from collections.abc import Sequence
from uuid import UUID

from studybuddy.application.adapters.chat_history_adapter import ChatHistoryAdapter
from studybuddy.application.services.document_service import DocumentService
from studybuddy.core.document_processing.models import RetrievalResult
from studybuddy.core.exceptions import DocumentNotFoundError
from studybuddy.core.interfaces import TextGenerator
from studybuddy.core.retrieval import SimilarityRetriever
from studybuddy.models.chat import ChatHistoryResponse, ChatResponse, Citation

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTIONS = (
    "You are a helpful educational assistant. Answer the student's question based on "
    "the provided context from their coursebook. Always cite page numbers when referencing "
    'specific information. Use format: "According to page X: [brief quote]"'
)

SNIPPET_LENGTH = 200


def format_context(chunks: Sequence[RetrievalResult]) -> str:
    """Render retrieved chunks as numbered, page-tagged passages."""
    return "\n\n".join(
        f'[{index}] From page {chunk.page_number}: "{chunk.text}"'
        for index, chunk in enumerate(chunks, start=1)
    )


def build_prompt(message: str, chunks: Sequence[RetrievalResult]) -> str:
    """Build the grounded prompt for a student question."""
    return (
        f"{SYSTEM_INSTRUCTIONS}\n\n"
        f"Context from coursebook:\n{format_context(chunks)}\n\n"
        f"Student's question: {message}"
    )


class ChatService:
    """Answer questions using chunks retrieved from the user's documents."""

    def __init__(
        self,
        document_service: DocumentService,
        retriever: SimilarityRetriever,
        generator: TextGenerator,
        history: ChatHistoryAdapter,
        default_top_k: int = 5,
    ) -> None:
        self._document_service = document_service
        self._retriever = retriever
        self._generator = generator
        self._history = history
        self._default_top_k = default_top_k

    async def process_chat(
        self,
        user_id: UUID,
        document_ids: Sequence[UUID],
        message: str,
        top_k: int | None = None,
    ) -> ChatResponse:
        """
        Answer a question grounded in the given documents.

        The turn is saved to the chat history of the first accessible
        document in ``document_ids``.

        Args:
            user_id: Requesting user
            document_ids: Documents to search
            message: Student question
            top_k: Number of chunks placed in the prompt (service default if None)

        Returns:
            ChatResponse: Answer and page citations

        Raises:
            DocumentNotFoundError: None of the documents belongs to the user
            NoContentError: No document has been indexed yet
            EmbeddingProviderError: Query embedding failed
            GenerationError: LLM call failed
        """
        owned_ids = await self._document_service.get_owned_ids(document_ids, user_id)
        if not owned_ids:
            raise DocumentNotFoundError(
                ", ".join(str(doc_id) for doc_id in document_ids),
                details={"reason": "No accessible documents found"},
            )

        chunks = await self._retriever.retrieve(message, owned_ids, top_k or self._default_top_k)
        answer = await self._generator.complete(build_prompt(message, chunks))
        citations = [
            Citation(
                document_id=chunk.document_id,
                document_title=chunk.document_title,
                page_number=chunk.page_number,
                snippet=chunk.snippet(SNIPPET_LENGTH),
                similarity=chunk.similarity,
            )
            for chunk in chunks
        ]

        await self._history.add_turn(user_id, UUID(owned_ids[0]), message, answer, citations)

        logger.info(
            f"{__name__}:process_chat - Answer generated",
            extra={"documents": len(owned_ids), "chunks": len(chunks), "answer_len": len(answer)},
        )
        return ChatResponse(answer=answer, citations=citations)

    async def get_history(
        self,
        user_id: UUID,
        document_id: UUID,
        limit: int | None = None,
    ) -> ChatHistoryResponse:
        """
        Get the stored conversation for an owned document.

        Raises:
            DocumentNotFoundError: Missing or owned by someone else
        """
        document = await self._document_service.get_document(document_id, user_id)
        messages = await self._history.get_messages(user_id, document.id, limit=limit)
        return ChatHistoryResponse(document_id=document.id, document_title=document.title, messages=messages)

    async def clear_history(self, user_id: UUID, document_id: UUID) -> int:
        """
        Delete the stored conversation for an owned document.

        Raises:
            DocumentNotFoundError: Missing or owned by someone else
        """
        document = await self._document_service.get_document(document_id, user_id)
        return await self._history.clear(user_id, document.id)
