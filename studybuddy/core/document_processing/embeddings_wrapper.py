"""
Google Generative AI embedding client with fixed output dimensionality.

Wraps GoogleGenerativeAIEmbeddings so every call requests the same vector
size and every provider failure surfaces as EmbeddingProviderError.

Dependencies: langchain_google_genai
System role: Embedding provider adapter for indexing and retrieval
"""

import logging

from dotenv import load_dotenv
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from studybuddy.core.exceptions import EmbeddingProviderError

load_dotenv()

logger = logging.getLogger(__name__)


class GeminiEmbeddingClient:
    """
    Async embedding client backed by Gemini embeddings.

    The base GoogleGenerativeAIEmbeddings class ignores output_dimensionality
    in the constructor, so the configured dimension is passed on every call.
    """

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 768,
        google_api_key: str | None = None,
        embeddings: GoogleGenerativeAIEmbeddings | None = None,
    ) -> None:
        """
        Initialize client with model and fixed dimension.

        Args:
            model: Google embedding model ID
            output_dimensionality: Vector size requested for every call
            google_api_key: API key (GOOGLE_API_KEY from environment if None)
            embeddings: Pre-built LangChain embeddings instance
        """
        self._model = model
        self._output_dimensionality = output_dimensionality
        if embeddings is not None:
            self._embeddings = embeddings
        elif google_api_key:
            self._embeddings = GoogleGenerativeAIEmbeddings(model=model, google_api_key=google_api_key)
        else:
            self._embeddings = GoogleGenerativeAIEmbeddings(model=model)
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    @property
    def dimension(self) -> int:
        return self._output_dimensionality

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding vector of the configured dimension

        Raises:
            EmbeddingProviderError: When the provider call fails or returns nothing
        """
        try:
            vector = await self._embeddings.aembed_query(
                text,
                output_dimensionality=self._output_dimensionality,
            )
        except Exception as e:
            raise EmbeddingProviderError(
                f"Embedding request failed: {e}",
                model=self._model,
                details={"text_length": len(text)},
            ) from e

        if not vector:
            raise EmbeddingProviderError(
                "Embedding provider returned an empty vector",
                model=self._model,
            )
        return [float(value) for value in vector]
