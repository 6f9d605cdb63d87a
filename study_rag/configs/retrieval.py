"""
Retrieval configuration settings.

Chunking defaults and ranking parameters for the RAG layer.

Dependencies: pydantic, pydantic_settings
System role: Retrieval and chunking configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from study_rag.configs.base import env_config


class RetrievalSettings(BaseSettings):
    """Retrieval and chunking configuration."""

    model_config = env_config("RAG_")

    top_k: int = Field(default=5, ge=1, le=100, description="Number of top results to retrieve")
    chunk_size: int = Field(default=1000, ge=1, description="Maximum chunk size in characters")
    chunk_overlap: int = Field(default=200, ge=0, description="Overlap between consecutive chunks")
    chunk_strategy: Literal["sentence", "recursive"] = Field(
        default="sentence",
        description="Chunking strategy used when raw text is ingested",
    )
