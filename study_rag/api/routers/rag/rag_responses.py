"""
RAG response mapping utilities.

Transforms retrieval-layer records into Pydantic response models.

Dependencies: study_rag.models.rag, study_rag.boundary.vdb, study_rag.core.context_builder
System role: RAG response transformation
"""

from collections.abc import Sequence

from study_rag.boundary.vdb import DocumentMetadata, RetrievedChunk, StoreStats
from study_rag.core.context_builder import GroundedContext
from study_rag.models.rag import (
    ContextResponse,
    DocumentMetadataResponse,
    QueryResponse,
    RetrievedChunkResponse,
    StatsResponse,
)


def map_chunks_to_response(chunks: Sequence[RetrievedChunk]) -> QueryResponse:
    results = [RetrievedChunkResponse(**chunk.model_dump()) for chunk in chunks]
    return QueryResponse(results=results, count=len(results))


def map_context_to_response(grounded: GroundedContext) -> ContextResponse:
    return ContextResponse(
        context=grounded.context,
        chunks_found=grounded.chunks_found,
        rag_used=grounded.rag_used,
        message=grounded.message,
        chunks=[RetrievedChunkResponse(**chunk.model_dump()) for chunk in grounded.chunks],
    )


def map_metadata_to_response(metadata: DocumentMetadata) -> DocumentMetadataResponse:
    return DocumentMetadataResponse(**metadata.model_dump())


def map_stats_to_response(stats: StoreStats) -> StatsResponse:
    """
    Transform store statistics into StatsResponse.

    Args:
        stats: StoreStats from the chunk store

    Returns:
        StatsResponse: Pydantic model for API response
    """
    return StatsResponse(
        document_count=stats.document_count,
        total_chunks=stats.total_chunks,
        documents=[map_metadata_to_response(document) for document in stats.documents],
    )
