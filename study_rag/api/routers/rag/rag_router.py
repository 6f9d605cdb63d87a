"""
RAG API endpoints.

Routes:
- POST /rag/documents - Ingest a document (pre-chunked or raw text)
- GET /rag/documents/{id} - Get document metadata
- DELETE /rag/documents/{id} - Remove a document (idempotent)
- POST /rag/documents/{id}/query - Ranked chunks of one document
- POST /rag/documents/{id}/context - Grounded context for a chat prompt
- POST /rag/query - Ranked chunks across all documents
- GET /rag/stats - Chunk store statistics

Dependencies: study_rag.application, study_rag.models.rag
System role: RAG HTTP API
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Response, status

from study_rag.api.deps.dependencies import get_retrieval_service, get_text_chunker
from study_rag.application.services import RetrievalService
from study_rag.core.context_builder import build_grounded_context
from study_rag.core.exceptions import DocumentNotFoundError
from study_rag.models.rag import (
    ContextResponse,
    DocumentMetadataResponse,
    IngestDocumentRequest,
    IngestDocumentResponse,
    QueryRequest,
    QueryResponse,
    StatsResponse,
)

from .rag_error_handling import handle_rag_errors
from .rag_responses import (
    map_chunks_to_response,
    map_context_to_response,
    map_metadata_to_response,
    map_stats_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rag", tags=["rag"])


@router.post("/documents", response_model=IngestDocumentResponse, status_code=201)
@handle_rag_errors
async def ingest_document(
    request: IngestDocumentRequest,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
    chunker_factory=Depends(get_text_chunker),
) -> IngestDocumentResponse:
    """
    Ingest a document into the RAG store, replacing any previous version.

    Args:
        request: IngestDocumentRequest with chunks or raw text
        retrieval_service: Injected RetrievalService
        chunker_factory: Injected TextChunker factory

    Returns:
        IngestDocumentResponse: Document ID and stored chunk count

    Raises:
        HTTPException(400): Invalid chunks
    """
    document_id = request.document_id or str(uuid.uuid4())

    if request.text is not None:
        chunks = chunker_factory(request.chunk_strategy).chunk(request.text)
    else:
        chunks = request.chunks

    logger.info(
        "Ingesting document",
        extra={"document_id": document_id, "chunk_count": len(chunks), "raw_text": request.text is not None}
    )

    result = await retrieval_service.ingest(document_id, chunks, request.metadata)
    return IngestDocumentResponse(document_id=result.document_id, chunk_count=result.chunk_count)


@router.get("/documents/{document_id}", response_model=DocumentMetadataResponse)
@handle_rag_errors
async def get_document_metadata(
    document_id: str,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> DocumentMetadataResponse:
    """
    Get metadata of an ingested document.

    Raises:
        HTTPException(404): Document not in the store
    """
    metadata = retrieval_service.get_metadata(document_id)
    if metadata is None:
        raise DocumentNotFoundError(document_id)
    return map_metadata_to_response(metadata)


@router.delete("/documents/{document_id}", status_code=204)
@handle_rag_errors
async def remove_document(
    document_id: str,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> Response:
    """Remove a document. Unknown documents are a no-op."""
    retrieval_service.remove(document_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/documents/{document_id}/query", response_model=QueryResponse)
@handle_rag_errors
async def query_document(
    document_id: str,
    request: QueryRequest,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> QueryResponse:
    """
    Rank the chunks of one document against a question.

    Args:
        document_id: Document ID
        request: QueryRequest with query and optional top_k
        retrieval_service: Injected RetrievalService

    Returns:
        QueryResponse: Ranked chunks, empty for unknown documents
    """
    chunks = await retrieval_service.retrieve(document_id, request.query, request.top_k)
    return map_chunks_to_response(chunks)


@router.post("/documents/{document_id}/context", response_model=ContextResponse)
@handle_rag_errors
async def build_document_context(
    document_id: str,
    request: QueryRequest,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> ContextResponse:
    """Build the grounded excerpt block a chat prompt for this document uses."""
    chunks = await retrieval_service.retrieve(document_id, request.query, request.top_k)
    return map_context_to_response(build_grounded_context(chunks))


@router.post("/query", response_model=QueryResponse)
@handle_rag_errors
async def query_all_documents(
    request: QueryRequest,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> QueryResponse:
    """Rank chunks across every ingested document."""
    chunks = await retrieval_service.retrieve_across_all(request.query, request.top_k)
    return map_chunks_to_response(chunks)


@router.get("/stats", response_model=StatsResponse)
@handle_rag_errors
async def get_stats(
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> StatsResponse:
    """Chunk store statistics for monitoring memory growth."""
    return map_stats_to_response(retrieval_service.stats())
