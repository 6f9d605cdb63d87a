"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from study_rag.configs.embeddings import EmbeddingSettings
from study_rag.configs.retrieval import RetrievalSettings
from study_rag.configs.settings import Settings, get_settings

__all__ = ["EmbeddingSettings", "RetrievalSettings", "Settings", "get_settings"]
