"""
RAG error handling utilities.

Provides a decorator for consistent error handling across RAG API endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from study_rag.core.exceptions import (
    DocumentNotFoundError,
    EmbeddingError,
    ValidationError,
)
from study_rag.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_rag_errors(func: F) -> F:
    """
    Decorator to handle RAG errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (document_id)
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except DocumentNotFoundError as e:
            logger.warning(
                "Document not found",
                extra={"document_id": e.document_id, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=e.message
            )

        except ValidationError as e:
            logger.warning("Invalid RAG request", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message
            )

        except EmbeddingError as e:
            logger.error(
                "Embedding provider failure",
                extra={"provider": e.provider, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Embedding provider unavailable: {e.message}"
            )

        except Exception as e:
            log_exception_with_context(
                logger, "Unexpected failure in RAG operation", e, endpoint=func.__name__
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred during RAG operation: {str(e)}"
            )

    return wrapper  # type: ignore
