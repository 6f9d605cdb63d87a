"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_retrieval_service,
    get_service_cache,
    get_settings_dependency,
    get_text_chunker,
)

__all__ = [
    "ServiceCache",
    "get_retrieval_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_text_chunker",
]
