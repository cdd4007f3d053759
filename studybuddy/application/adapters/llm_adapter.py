"""
Gemini chat model adapter.

Wraps ChatGoogleGenerativeAI behind the TextGenerator protocol so the chat
service only deals with prompt strings.

Dependencies: langchain_google_genai
System role: LLM provider adapter for grounded answers
"""

import logging

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from studybuddy.core.exceptions import GenerationError

logger = logging.getLogger(__name__)


class GeminiTextGenerator:
    """Single-turn text completion backed by a Gemini chat model."""

    def __init__(
        self,
        model_id: str = "gemini-2.0-flash",
        temperature: float = 0.7,
        google_api_key: str | None = None,
        model: ChatGoogleGenerativeAI | None = None,
    ) -> None:
        """
        Initialize generator.

        Args:
            model_id: Gemini model identifier
            temperature: Sampling temperature
            google_api_key: API key (GOOGLE_API_KEY from environment if None)
            model: Pre-built chat model
        """
        self._model_id = model_id
        if model is not None:
            self._model = model
        elif google_api_key:
            self._model = ChatGoogleGenerativeAI(
                model=model_id,
                temperature=temperature,
                google_api_key=google_api_key,
            )
        else:
            self._model = ChatGoogleGenerativeAI(model=model_id, temperature=temperature)

    async def complete(self, prompt: str) -> str:
        """
        Generate a completion for ``prompt``.

        Raises:
            GenerationError: When the model call fails or returns no text
        """
        try:
            response = await self._model.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            raise GenerationError(
                f"Text generation failed: {e}",
                details={"model": self._model_id},
            ) from e

        content = response.content
        # Multimodal models may return a list of content parts
        if isinstance(content, list):
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in content
            )
        if not content:
            raise GenerationError("Model returned an empty response", details={"model": self._model_id})
        return content
