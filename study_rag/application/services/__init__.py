"""Service orchestrators."""

from .retrieval_service import IngestResult, RetrievalService

__all__ = [
    "IngestResult",
    "RetrievalService",
]
