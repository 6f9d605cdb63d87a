"""
Dependency injection container.

Factory functions for FastAPI dependencies. The chunk store, embedding
adapter and retrieval service are created once and shared by every request.

Dependencies: study_rag.configs, study_rag.application, study_rag.boundary, study_rag.core
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from study_rag.configs import Settings, get_settings
from study_rag.application.chunker import ChunkStrategy, TextChunker
from study_rag.application.services import RetrievalService


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._chunk_store = None
        self._embedding_adapter = None
        self._retrieval_service = None

    @property
    def settings(self) -> Settings:
        """Get settings used to build services."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def chunk_store(self):
        """Get cached in-memory chunk store."""
        if self._chunk_store is None:
            from study_rag.boundary.vdb import InMemoryChunkStore
            self._chunk_store = InMemoryChunkStore()
        return self._chunk_store

    @property
    def embedding_adapter(self):
        """Get cached embedding adapter."""
        if self._embedding_adapter is None:
            from study_rag.core.embedding_adapter import EmbeddingAdapter
            self._embedding_adapter = EmbeddingAdapter(settings=self.settings.embeddings)
        return self._embedding_adapter

    @property
    def retrieval_service(self) -> RetrievalService:
        """Get cached retrieval service."""
        if self._retrieval_service is None:
            self._retrieval_service = RetrievalService(
                store=self.chunk_store,
                embedder=self.embedding_adapter,
                default_top_k=self.settings.retrieval.top_k,
            )
        return self._retrieval_service

    async def aclose(self) -> None:
        """Release network clients and clear all cached instances."""
        if self._embedding_adapter is not None:
            await self._embedding_adapter.aclose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        if self._chunk_store is not None:
            self._chunk_store.clear()
        self._chunk_store = None
        self._embedding_adapter = None
        self._retrieval_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_retrieval_service() -> RetrievalService:
    """
    Get retrieval service instance.

    Returns:
        RetrievalService: Shared retrieval service bound to the process chunk store
    """
    return get_service_cache().retrieval_service


def get_text_chunker(settings: Settings = Depends(get_settings_dependency)):
    """
    Get a chunker factory configured from retrieval settings.

    Args:
        settings: Application settings (injected via Depends)

    Returns:
        Callable[[ChunkStrategy | None], TextChunker]: Builds a chunker for a strategy
    """

    def build(strategy: ChunkStrategy | None = None) -> TextChunker:
        return TextChunker(
            chunk_size=settings.retrieval.chunk_size,
            chunk_overlap=settings.retrieval.chunk_overlap,
            strategy=strategy or settings.retrieval.chunk_strategy,
        )

    return build
