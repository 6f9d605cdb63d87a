"""
Embedding provider adapter.

Selects the configured embedding provider once per process, enforces a
timeout on every call and applies the configured failure policy: for each
provider kind (local, cloud) a failure either falls back to the hashed
bag-of-words embedding or propagates as EmbeddingError.

Defaults keep local failures masked and cloud failures loud.

Dependencies: study_rag.boundary.embeddings, study_rag.core.fallback_embedder, study_rag.configs
System role: Embedding entry point for ingestion and retrieval
"""

import asyncio
import logging

from study_rag.boundary.embeddings import EmbeddingProvider, create_embedding_provider
from study_rag.configs import EmbeddingSettings
from study_rag.core.exceptions import EmbeddingError
from study_rag.core.fallback_embedder import FallbackEmbedder
from study_rag.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


class EmbeddingAdapter:
    """
    Embedding adapter with lazy, idempotent provider selection.

    A provider can be injected directly; otherwise it is built from settings
    on the first initialize() or embed() call and reused afterwards.
    """

    def __init__(
        self,
        settings: EmbeddingSettings | None = None,
        provider: EmbeddingProvider | None = None,
        fallback: FallbackEmbedder | None = None,
    ) -> None:
        """
        Initialize adapter.

        Args:
            settings: Embedding settings (defaults read from environment)
            provider: Pre-built provider, skips the factory
            fallback: Fallback embedder (defaults to settings.fallback_dimension)
        """
        self.settings = settings or EmbeddingSettings()
        self._provider = provider
        self.fallback = fallback or FallbackEmbedder(self.settings.fallback_dimension)

    @property
    def provider(self) -> EmbeddingProvider | None:
        """Active provider, or None before initialization."""
        return self._provider

    def initialize(self) -> EmbeddingProvider:
        """
        Select the embedding provider. Repeat calls return the same provider.

        Returns:
            EmbeddingProvider: Active provider
        """
        if self._provider is None:
            self._provider = create_embedding_provider(self.settings)
            logger.info(
                f"{__name__}:initialize - Embedding provider ready: {self._provider.name}"
            )
        return self._provider

    def should_fallback(self, provider_kind: str | None) -> bool:
        """Whether a failure of the given provider kind is masked by the fallback."""
        if provider_kind == "cloud":
            return self.settings.fallback_on_cloud_error
        return self.settings.fallback_on_local_error

    async def embed(self, text: str) -> list[float]:
        """
        Embed text with the active provider.

        Args:
            text: Non-empty text

        Returns:
            list[float]: Provider embedding, or the fallback embedding when the
                provider fails and the policy for its kind allows fallback

        Raises:
            EmbeddingError: Provider failed and the policy says propagate
        """
        try:
            provider = self.initialize()
        except EmbeddingError as e:
            return self._handle_failure(e, text)

        try:
            return await asyncio.wait_for(
                provider.embed_query(text),
                timeout=self.settings.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            error = EmbeddingError(
                f"Embedding timed out after {self.settings.timeout_seconds}s",
                provider=provider.kind,
            )
            error.__cause__ = e
            return self._handle_failure(error, text)
        except EmbeddingError as e:
            return self._handle_failure(e, text)

    def embed_fallback(self, text: str) -> list[float]:
        """Fallback embedding, bypassing the provider."""
        return self.fallback.embed(text)

    def _handle_failure(self, error: EmbeddingError, text: str) -> list[float]:
        if not self.should_fallback(error.provider):
            raise error
        logger.warning(
            f"{__name__}:embed - Embedding provider unavailable, using fallback: {error.message}",
            extra={"provider": error.provider, "text_preview": safe_log_value(text, max_length=80)},
        )
        return self.embed_fallback(text)

    async def aclose(self) -> None:
        """Release the provider's resources."""
        if self._provider is not None:
            await self._provider.aclose()
