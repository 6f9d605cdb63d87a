"""
Retrieval service orchestrator.

Coordinates RAG ingestion and retrieval: embeds chunks and queries through
the EmbeddingAdapter, stores chunk records in the chunk store and ranks them
with the similarity engine.

Embedding failures never escape ingest/retrieve: a failed chunk or query
embedding is replaced with the fallback embedding. Unknown documents yield
empty results. Only contract violations raise ValidationError.

Dependencies: study_rag.core, study_rag.boundary.vdb
System role: Retrieval orchestration consumed by the chat layer
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

from pydantic import BaseModel, Field

from study_rag.boundary.vdb import (
    DocumentMetadata,
    InMemoryChunkStore,
    RetrievedChunk,
    StoreStats,
)
from study_rag.core.embedding_adapter import EmbeddingAdapter
from study_rag.core.exceptions import EmbeddingError, ValidationError
from study_rag.core.similarity import rank_chunks, sort_by_similarity
from study_rag.observability.log_utils import log_with_context, safe_log_value

logger = logging.getLogger(__name__)


class IngestResult(BaseModel):
    """Outcome of a document ingestion."""

    document_id: str = Field(description="Ingested document ID")
    chunk_count: int = Field(description="Number of chunks stored")


class RetrievalService:
    """Retrieval service orchestrator."""

    def __init__(
        self,
        store: InMemoryChunkStore,
        embedder: EmbeddingAdapter,
        default_top_k: int = 5,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            store: Chunk store shared by all requests
            embedder: Embedding adapter
            default_top_k: top_k used when callers pass None
        """
        self.store = store
        self.embedder = embedder
        self.default_top_k = default_top_k
        # Per-document ingest locks, dropped once no ingest holds or awaits them
        self._ingest_locks: dict[str, asyncio.Lock] = {}
        self._ingest_lock_users: dict[str, int] = {}

    async def ingest(
        self,
        document_id: str,
        chunks: Sequence[str],
        metadata: dict[str, Any] | None = None,
    ) -> IngestResult:
        """
        Embed and store a document's chunks, replacing any previous version.

        Chunks are embedded in input order. Concurrent ingestions of the same
        document run one after another; the last one to run wins.

        Args:
            document_id: Document ID
            chunks: Chunk texts in document order
            metadata: Caller metadata stored with the document

        Returns:
            IngestResult: Document ID and stored chunk count

        Raises:
            ValidationError: Missing document ID or non-text chunks
        """
        self._require_document_id(document_id)
        if isinstance(chunks, str) or not isinstance(chunks, Sequence):
            raise ValidationError("chunks must be a list of strings", field="chunks")
        for index, chunk in enumerate(chunks):
            if not isinstance(chunk, str) or not chunk.strip():
                raise ValidationError(
                    f"Chunk {index} must be a non-empty string", field="chunks"
                )

        logger.info(
            f"{__name__}:ingest - Adding {len(chunks)} chunks to RAG for document {document_id}"
        )

        async with self._document_lock(document_id):
            embedded: list[tuple[str, list[float]]] = []
            fallback_count = 0
            for index, chunk in enumerate(chunks):
                try:
                    embedding = await self.embedder.embed(chunk)
                except EmbeddingError as e:
                    logger.warning(
                        f"{__name__}:ingest - Failed to embed chunk {index} of {document_id}, "
                        f"using fallback: {e.message}"
                    )
                    embedding = self.embedder.embed_fallback(chunk)
                    fallback_count += 1
                embedded.append((chunk, embedding))

            stored = self.store.put_document(document_id, embedded, metadata)

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:ingest - Added {stored.chunk_count} embeddings for document {document_id}",
            document_id=document_id,
            chunk_count=stored.chunk_count,
            fallback_count=fallback_count,
        )
        return IngestResult(document_id=document_id, chunk_count=stored.chunk_count)

    async def retrieve(
        self,
        document_id: str,
        query: str,
        top_k: int | None = None,
    ) -> list[RetrievedChunk]:
        """
        Retrieve the chunks of one document most similar to the query.

        Args:
            document_id: Document ID
            query: Natural-language question
            top_k: Maximum number of results (defaults to default_top_k)

        Returns:
            list[RetrievedChunk]: Ranked chunks, [] if the document has none

        Raises:
            ValidationError: Missing document ID, empty query or bad top_k
        """
        self._require_document_id(document_id)
        self._require_query(query)
        top_k = self._resolve_top_k(top_k)

        chunks = self.store.get_document(document_id)
        if not chunks:
            logger.warning(f"{__name__}:retrieve - No embeddings found for document {document_id}")
            return []

        query_vector = await self._embed_query(query)
        results = rank_chunks(chunks, query_vector, top_k)

        logger.info(
            f"{__name__}:retrieve - Retrieved {len(results)} chunks for query "
            f"'{safe_log_value(query, max_length=50)}' "
            f"(top similarity: {results[0].similarity:.3f})"
        )
        return results

    async def retrieve_across_all(
        self,
        query: str,
        top_k: int | None = None,
    ) -> list[RetrievedChunk]:
        """
        Retrieve the best chunks across every stored document.

        The query is embedded once; each document's top_k candidates are merged,
        re-sorted by similarity and truncated to top_k. Cost is linear in the
        total number of stored chunks.

        Args:
            query: Natural-language question
            top_k: Maximum number of results (defaults to default_top_k)

        Returns:
            list[RetrievedChunk]: Ranked chunks tagged with their document ID
        """
        self._require_query(query)
        top_k = self._resolve_top_k(top_k)

        document_ids = self.store.document_ids()
        if not document_ids:
            return []

        query_vector = await self._embed_query(query)
        candidates: list[RetrievedChunk] = []
        for document_id in document_ids:
            candidates.extend(rank_chunks(self.store.get_document(document_id), query_vector, top_k))

        results = sort_by_similarity(candidates)[:top_k]
        logger.info(
            f"{__name__}:retrieve_across_all - Retrieved {len(results)} chunks "
            f"from {len(document_ids)} documents"
        )
        return results

    def remove(self, document_id: str) -> bool:
        """
        Remove a document from the store. Removing an unknown document is a no-op.

        Returns:
            bool: True if the document was present
        """
        self._require_document_id(document_id)
        removed = self.store.remove_document(document_id)
        logger.info(f"{__name__}:remove - Removed document {document_id} from RAG (present={removed})")
        return removed

    def get_metadata(self, document_id: str) -> DocumentMetadata | None:
        self._require_document_id(document_id)
        return self.store.get_metadata(document_id)

    def stats(self) -> StoreStats:
        return self.store.stats()

    @asynccontextmanager
    async def _document_lock(self, document_id: str) -> AsyncIterator[None]:
        """Hold the ingest lock of one document, creating and pruning it on demand."""
        lock = self._ingest_locks.setdefault(document_id, asyncio.Lock())
        self._ingest_lock_users[document_id] = self._ingest_lock_users.get(document_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            remaining = self._ingest_lock_users[document_id] - 1
            if remaining:
                self._ingest_lock_users[document_id] = remaining
            else:
                del self._ingest_lock_users[document_id]
                del self._ingest_locks[document_id]

    async def _embed_query(self, query: str) -> list[float]:
        try:
            return await self.embedder.embed(query)
        except EmbeddingError as e:
            logger.warning(f"{__name__}:_embed_query - Query embedding failed, using fallback: {e.message}")
            return self.embedder.embed_fallback(query)

    def _resolve_top_k(self, top_k: int | None) -> int:
        if top_k is None:
            return self.default_top_k
        if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k < 1:
            raise ValidationError(f"top_k must be a positive integer, got {top_k!r}", field="top_k")
        return top_k

    @staticmethod
    def _require_document_id(document_id: str) -> None:
        if not isinstance(document_id, str) or not document_id.strip():
            raise ValidationError("document_id is required", field="document_id")

    @staticmethod
    def _require_query(query: str) -> None:
        if not isinstance(query, str) or not query.strip():
            raise ValidationError("query is required", field="query")
