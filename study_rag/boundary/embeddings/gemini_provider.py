"""
Google Gemini embedding provider.

Wraps GoogleGenerativeAIEmbeddings behind the EmbeddingProvider interface.
Every failure, including client construction with bad credentials, is
reported as EmbeddingError so the configured failure policy can decide
whether it propagates.

Dependencies: langchain_google_genai
System role: Cloud embedding backend
"""

import logging

from langchain_google_genai import GoogleGenerativeAIEmbeddings

from study_rag.boundary.embeddings.base import EmbeddingProvider
from study_rag.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class GeminiEmbeddingProvider(EmbeddingProvider):
    """Cloud embedding backend using Google Gemini."""

    kind = "cloud"

    def __init__(
        self,
        model: str = "models/text-embedding-004",
        api_key: str | None = None,
    ) -> None:
        """
        Initialize Gemini embeddings client.

        Args:
            model: Google embedding model ID
            api_key: Google API key (falls back to GOOGLE_API_KEY when None)

        Raises:
            EmbeddingError: If the client cannot be constructed
        """
        self.model = model
        self.name = f"gemini:{model}"
        kwargs = {"model": model}
        if api_key:
            kwargs["google_api_key"] = api_key
        try:
            self._embeddings = GoogleGenerativeAIEmbeddings(**kwargs)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to initialize Gemini embeddings: {e}",
                provider=self.kind,
                details={"model": model},
            ) from e
        logger.info(f"{__name__}:__init__ - Initialized with model={model}")

    async def embed_query(self, text: str) -> list[float]:
        try:
            embedding = await self._embeddings.aembed_query(text)
        except Exception as e:
            raise EmbeddingError(
                f"Gemini embedding failed: {type(e).__name__}: {e}",
                provider=self.kind,
                details={"model": self.model},
            ) from e
        return [float(value) for value in embedding]
