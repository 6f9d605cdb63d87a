"""
RAG router package.

Exports the router for ingestion, retrieval and store administration endpoints.
"""

from .rag_router import router

__all__ = ["router"]
