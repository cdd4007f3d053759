"""Adapters used by application services: LLM provider and chat history storage."""

from .chat_history_adapter import ChatHistoryAdapter
from .llm_adapter import GeminiTextGenerator

__all__ = ["ChatHistoryAdapter", "GeminiTextGenerator"]
