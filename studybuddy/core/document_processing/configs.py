"""
Configuration settings for the indexing and retrieval pipeline.

Provides environment-based configuration for fetching, chunking, embedding
and retrieval.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RAGSettings(BaseSettings):
    """Settings for document indexing and similarity retrieval."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="RAG_",
        case_sensitive=False,
        extra="ignore",
    )

    # Google Gemini
    google_api_key: str = Field(
        default="",
        description="Google Generative AI API key (falls back to GOOGLE_API_KEY when empty)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google embedding model ID",
    )
    embedding_dimension: int = Field(
        default=768,
        description="Fixed output dimensionality requested from the embedding model",
    )
    chat_model: str = Field(
        default="gemini-2.0-flash",
        description="Google chat model used for grounded answers",
    )
    chat_temperature: float = Field(default=0.7, description="Chat model temperature")

    # Chunking settings
    page_chunk_size: int = Field(default=800, description="Maximum chunk size per page")
    page_chunk_overlap: int = Field(default=100, description="Overlap between page chunks")
    min_chunk_length: int = Field(
        default=50,
        description="Chunks shorter than this after trimming are discarded",
    )

    # Embedding throttling
    embedding_batch_size: int = Field(default=5, description="Concurrent embedding calls per batch")
    embedding_batch_delay_seconds: float = Field(
        default=1.0,
        description="Pause between embedding batches",
    )

    # Retrieval
    default_top_k: int = Field(default=5, description="Chunks returned per query")

    # Fetching
    fetch_timeout_seconds: float = Field(default=60.0, description="HTTP fetch timeout")
    s3_region: str = Field(default="ap-southeast-2", description="AWS region for s3:// sources")
    upload_directory: str = Field(
        default="./data/uploads",
        description="Local directory where uploaded files are kept",
    )

    @model_validator(mode="after")
    def _check_chunk_window(self) -> "RAGSettings":
        size, overlap = self.page_chunk_size, self.page_chunk_overlap
        if size <= 0 or overlap <= 0 or overlap >= size:
            raise ValueError(
                f"chunk overlap must be positive and smaller than chunk size "
                f"(got size={size}, overlap={overlap})"
            )
        if self.embedding_batch_size < 1:
            raise ValueError("embedding_batch_size must be at least 1")
        return self


@lru_cache
def get_rag_settings() -> RAGSettings:
    """
    Get cached pipeline settings instance.

    Returns:
        RAGSettings: Singleton settings loaded from environment
    """
    return RAGSettings()
