"""
Embedding provider factory for selecting between Ollama (local) and Gemini (cloud).

Depends on EMBEDDING_PROVIDER (or AI_PROVIDER) environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: study_rag.boundary.embeddings, study_rag.configs
System role: Embedding provider instantiation and selection
"""

import logging

from study_rag.boundary.embeddings.base import EmbeddingProvider
from study_rag.configs import EmbeddingSettings

logger = logging.getLogger(__name__)


def create_embedding_provider(settings: EmbeddingSettings) -> EmbeddingProvider:
    """
    Factory function to build the configured embedding provider.

    Args:
        settings: Embedding settings

    Returns:
        EmbeddingProvider: OllamaEmbeddingProvider or GeminiEmbeddingProvider

    Raises:
        ValueError: If the provider setting is invalid
    """
    provider = settings.provider.lower()

    if provider == "local":
        from study_rag.boundary.embeddings.ollama_provider import OllamaEmbeddingProvider

        logger.info(
            f"{__name__}:create_embedding_provider - Using Ollama embeddings "
            f"({settings.ollama_model} at {settings.ollama_base_url})"
        )
        return OllamaEmbeddingProvider(
            base_url=settings.ollama_base_url,
            model=settings.ollama_model,
            timeout_seconds=settings.timeout_seconds,
        )

    elif provider == "cloud":
        from study_rag.boundary.embeddings.gemini_provider import GeminiEmbeddingProvider

        logger.info(
            f"{__name__}:create_embedding_provider - Using Gemini embeddings ({settings.gemini_model})"
        )
        return GeminiEmbeddingProvider(
            model=settings.gemini_model,
            api_key=settings.gemini_api_key,
        )

    else:
        raise ValueError(
            f"Invalid EMBEDDING_PROVIDER: {provider}. "
            f"Must be 'local' (Ollama) or 'cloud' (Gemini)."
        )
