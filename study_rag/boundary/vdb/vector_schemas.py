"""
Vector store schemas.

Pydantic models for chunk records, document metadata, retrieval results
and store statistics.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def make_chunk_id(document_id: str, chunk_index: int) -> str:
    """Stable chunk identifier derived from owning document and position."""
    return f"{document_id}-{chunk_index}"


class ChunkRecord(BaseModel):
    """One embedded unit of text. Immutable once stored."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic chunk identifier")
    text: str = Field(min_length=1, description="Chunk text content")
    embedding: list[float] = Field(description="Embedding vector")
    document_id: str = Field(description="Owning document ID")
    chunk_index: int = Field(ge=0, description="Position of the chunk in the source document")


class DocumentMetadata(BaseModel):
    """Document-level record stored next to a document's chunks."""

    document_id: str = Field(description="Document ID")
    chunk_count: int = Field(ge=0, description="Number of chunks stored at ingestion time")
    created_at: datetime = Field(description="Ingestion timestamp (UTC)")
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Caller-supplied metadata, passed through untouched",
    )


class RetrievedChunk(BaseModel):
    """Single ranked result from similarity search."""

    text: str = Field(description="Chunk text content")
    similarity: float = Field(description="Cosine similarity to the query (-1.0 to 1.0)")
    chunk_index: int = Field(description="Original position of the chunk in its document")
    document_id: str = Field(description="Document the chunk belongs to")


class StoreStats(BaseModel):
    """Aggregate view of the chunk store."""

    document_count: int = Field(description="Number of stored documents")
    total_chunks: int = Field(description="Number of stored chunks across all documents")
    documents: list[DocumentMetadata] = Field(
        default_factory=list,
        description="Metadata record of every stored document",
    )
