"""
Shared test fixtures and configuration for entire test suite.

Provides: stub embedding providers, embedding settings, chunk store,
embedding adapter and retrieval service fixtures.
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import asyncio
from collections.abc import Iterable, Mapping, Sequence

import pytest

from study_rag.application.services import RetrievalService
from study_rag.boundary.embeddings import EmbeddingProvider
from study_rag.boundary.vdb import InMemoryChunkStore
from study_rag.configs import EmbeddingSettings
from study_rag.core.embedding_adapter import EmbeddingAdapter
from study_rag.core.exceptions import EmbeddingError
from study_rag.core.fallback_embedder import fallback_embed


class StubEmbeddingProvider(EmbeddingProvider):
    """
    In-process embedding provider for tests.

    Returns vectors from a lookup table (hashed fallback for unknown texts),
    raises EmbeddingError for texts in fail_on, and sleeps before answering
    when delay is set.
    """

    def __init__(
        self,
        vectors: Mapping[str, Sequence[float]] | None = None,
        kind: str = "local",
        fail_on: Iterable[str] = (),
        fail_all: bool = False,
        delay: float = 0.0,
    ) -> None:
        self.kind = kind
        self.name = f"stub:{kind}"
        self.vectors = dict(vectors or {})
        self.fail_on = set(fail_on)
        self.fail_all = fail_all
        self.delay = delay
        self.calls: list[str] = []
        self.closed = False

    async def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_all or text in self.fail_on:
            raise EmbeddingError("stub provider failure", provider=self.kind)
        if text in self.vectors:
            return list(self.vectors[text])
        return fallback_embed(text, 16)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def embedding_settings() -> EmbeddingSettings:
    """Provide embedding settings with default failure policy."""
    return EmbeddingSettings(provider="local", timeout_seconds=1.0)


@pytest.fixture
def chunk_store() -> InMemoryChunkStore:
    """Provide an empty in-memory chunk store."""
    return InMemoryChunkStore()


@pytest.fixture
def provider_factory() -> type[StubEmbeddingProvider]:
    """Provide the stub provider class for tests that need custom behaviour."""
    return StubEmbeddingProvider


@pytest.fixture
def stub_provider() -> StubEmbeddingProvider:
    """Provide a local stub provider."""
    return StubEmbeddingProvider()


@pytest.fixture
def embedding_adapter(
    embedding_settings: EmbeddingSettings, stub_provider: StubEmbeddingProvider
) -> EmbeddingAdapter:
    """Provide an adapter bound to the stub provider."""
    return EmbeddingAdapter(settings=embedding_settings, provider=stub_provider)


@pytest.fixture
def retrieval_service(
    chunk_store: InMemoryChunkStore, embedding_adapter: EmbeddingAdapter
) -> RetrievalService:
    """Provide a retrieval service over the stub adapter and an empty store."""
    return RetrievalService(store=chunk_store, embedder=embedding_adapter)


@pytest.fixture
def offline_service(
    chunk_store: InMemoryChunkStore, embedding_settings: EmbeddingSettings
) -> RetrievalService:
    """Provide a retrieval service whose local provider is always down."""
    adapter = EmbeddingAdapter(
        settings=embedding_settings,
        provider=StubEmbeddingProvider(fail_all=True),
    )
    return RetrievalService(store=chunk_store, embedder=adapter)
