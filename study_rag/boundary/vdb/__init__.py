"""Vector storage boundary: in-memory chunk store and its schemas."""

from study_rag.boundary.vdb.chunk_store import InMemoryChunkStore
from study_rag.boundary.vdb.vector_schemas import (
    ChunkRecord,
    DocumentMetadata,
    RetrievedChunk,
    StoreStats,
    make_chunk_id,
)

__all__ = [
    "InMemoryChunkStore",
    "ChunkRecord",
    "DocumentMetadata",
    "RetrievedChunk",
    "StoreStats",
    "make_chunk_id",
]
