"""
Health check API endpoints.

Routes: GET /health, GET /health/embeddings

Dependencies: study_rag.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from study_rag.api.deps.dependencies import get_retrieval_service
from study_rag.application.services import RetrievalService


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class EmbeddingHealthResponse(HealthResponse):
    """Embedding layer health with store size."""

    provider: str
    provider_kind: str
    document_count: int
    total_chunks: int


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/embeddings", response_model=EmbeddingHealthResponse)
async def health_check_embeddings(
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> EmbeddingHealthResponse:
    """Report the configured embedding provider and chunk store size."""
    adapter = retrieval_service.embedder
    provider = adapter.provider
    stats = retrieval_service.stats()
    return EmbeddingHealthResponse(
        status="healthy",
        message="Embedding layer accessible",
        provider=provider.name if provider else "uninitialized",
        provider_kind=adapter.settings.provider,
        document_count=stats.document_count,
        total_chunks=stats.total_chunks,
    )
