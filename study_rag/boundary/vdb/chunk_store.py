"""
In-memory chunk store.

Holds, per document, the embedded chunk records and the document metadata
record. Instances are created once at startup and injected into the
retrieval service; nothing is persisted across restarts.

Dependencies: study_rag.boundary.vdb.vector_schemas
System role: Vector storage for RAG retrieval
"""

import logging
import threading
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from study_rag.boundary.vdb.vector_schemas import (
    ChunkRecord,
    DocumentMetadata,
    StoreStats,
    make_chunk_id,
)

logger = logging.getLogger(__name__)


class InMemoryChunkStore:
    """
    Process-local chunk store keyed by document ID.

    Chunk lists and metadata records are always written and removed together
    under one lock, so readers never see one without the other. There is no
    eviction: memory grows with ingested volume, use stats() to monitor it.
    """

    def __init__(self) -> None:
        self._chunks: dict[str, list[ChunkRecord]] = {}
        self._metadata: dict[str, DocumentMetadata] = {}
        self._lock = threading.Lock()

    def put_document(
        self,
        document_id: str,
        chunks: Sequence[tuple[str, Sequence[float]]],
        metadata: dict[str, Any] | None = None,
    ) -> DocumentMetadata:
        """
        Store a document's chunks, replacing any previous entry.

        The new records are built before the lock is taken and published in a
        single swap.

        Args:
            document_id: Document ID
            chunks: (text, embedding) pairs in document order
            metadata: Caller-supplied metadata

        Returns:
            DocumentMetadata: The metadata record now stored for the document
        """
        records = [
            ChunkRecord(
                id=make_chunk_id(document_id, index),
                text=text,
                embedding=list(embedding),
                document_id=document_id,
                chunk_index=index,
            )
            for index, (text, embedding) in enumerate(chunks)
        ]
        document_metadata = DocumentMetadata(
            document_id=document_id,
            chunk_count=len(records),
            created_at=datetime.now(timezone.utc),
            metadata=dict(metadata or {}),
        )

        with self._lock:
            replaced = document_id in self._chunks
            self._chunks[document_id] = records
            self._metadata[document_id] = document_metadata

        logger.debug(
            f"{__name__}:put_document - Stored {len(records)} chunks for {document_id} "
            f"(replaced={replaced})"
        )
        return document_metadata.model_copy(deep=True)

    def get_document(self, document_id: str) -> list[ChunkRecord]:
        """Return the document's chunk records, or an empty list if unknown."""
        with self._lock:
            return list(self._chunks.get(document_id, []))

    def get_metadata(self, document_id: str) -> DocumentMetadata | None:
        """Return a copy of the document's metadata record, or None if unknown."""
        with self._lock:
            metadata = self._metadata.get(document_id)
        return metadata.model_copy(deep=True) if metadata is not None else None

    def remove_document(self, document_id: str) -> bool:
        """
        Delete a document's chunks and metadata.

        Removing an unknown document is a no-op.

        Args:
            document_id: Document ID

        Returns:
            bool: True if the document was present
        """
        with self._lock:
            removed = self._chunks.pop(document_id, None) is not None
            self._metadata.pop(document_id, None)
        return removed

    def document_ids(self) -> list[str]:
        """Document IDs in insertion order."""
        with self._lock:
            return list(self._chunks)

    def stats(self) -> StoreStats:
        with self._lock:
            return StoreStats(
                document_count=len(self._chunks),
                total_chunks=sum(len(records) for records in self._chunks.values()),
                documents=[metadata.model_copy(deep=True) for metadata in self._metadata.values()],
            )

    def clear(self) -> None:
        """Drop every stored document."""
        with self._lock:
            self._chunks.clear()
            self._metadata.clear()
