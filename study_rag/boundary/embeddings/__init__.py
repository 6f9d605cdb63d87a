"""Embedding provider boundary: Ollama (local) and Gemini (cloud) backends."""

from study_rag.boundary.embeddings.base import EmbeddingProvider, ProviderKind
from study_rag.boundary.embeddings.embedding_factory import create_embedding_provider

__all__ = ["EmbeddingProvider", "ProviderKind", "create_embedding_provider"]
