"""
Core business logic module.

Contains domain business logic, exception hierarchy, and core components.
Embedding fallback, similarity ranking and context building reside here.
"""

from study_rag.core.exceptions import (
    StudyRagException,
    ValidationError,
    DocumentNotFoundError,
    EmbeddingError,
)

__all__ = [
    "StudyRagException",
    "ValidationError",
    "DocumentNotFoundError",
    "EmbeddingError",
]
