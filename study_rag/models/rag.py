"""
RAG domain models and schemas.

Request/response schemas for ingestion, retrieval and store administration.

Dependencies: pydantic
System role: RAG API contracts
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator


class IngestDocumentRequest(BaseModel):
    """Request schema for ingesting a document into the RAG store."""

    document_id: str | None = Field(
        default=None,
        description="Document ID (generated when omitted)",
    )
    chunks: list[str] | None = Field(
        default=None,
        description="Pre-chunked document text",
    )
    text: str | None = Field(
        default=None,
        description="Raw document text, chunked server-side",
    )
    metadata: dict[str, Any] = Field(default_factory=dict, description="Caller metadata")
    chunk_strategy: Literal["sentence", "recursive"] | None = Field(
        default=None,
        description="Chunking strategy for raw text (defaults to configured strategy)",
    )

    @model_validator(mode="after")
    def check_content(self) -> "IngestDocumentRequest":
        """Exactly one of chunks or text must be provided."""
        if (self.chunks is None) == (self.text is None):
            raise ValueError("Provide exactly one of 'chunks' or 'text'")
        return self


class IngestDocumentResponse(BaseModel):
    """Response schema for document ingestion."""

    document_id: str
    chunk_count: int


class QueryRequest(BaseModel):
    """Request schema for similarity retrieval."""

    query: str = Field(min_length=1, description="Natural-language question")
    top_k: int | None = Field(default=None, ge=1, le=100, description="Number of results")


class RetrievedChunkResponse(BaseModel):
    """Single ranked chunk."""

    text: str
    similarity: float
    chunk_index: int
    document_id: str


class QueryResponse(BaseModel):
    """Ranked retrieval results."""

    results: list[RetrievedChunkResponse]
    count: int


class ContextResponse(BaseModel):
    """Grounded context for a chat prompt."""

    context: str
    chunks_found: int
    rag_used: bool
    message: str | None = None
    chunks: list[RetrievedChunkResponse] = Field(default_factory=list)


class DocumentMetadataResponse(BaseModel):
    """Stored document metadata."""

    document_id: str
    chunk_count: int
    created_at: datetime
    metadata: dict[str, Any] = Field(default_factory=dict)


class StatsResponse(BaseModel):
    """Chunk store statistics."""

    document_count: int
    total_chunks: int
    documents: list[DocumentMetadataResponse]
