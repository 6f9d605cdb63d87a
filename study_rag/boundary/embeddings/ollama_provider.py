"""
Ollama embedding provider.

Calls the local Ollama server's /api/embeddings endpoint with
{"model": ..., "prompt": ...} and reads the "embedding" array back.

Dependencies: httpx, study_rag.core.exceptions
System role: Local embedding backend
"""

import logging

import httpx

from study_rag.boundary.embeddings.base import EmbeddingProvider
from study_rag.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class OllamaEmbeddingProvider(EmbeddingProvider):
    """Local embedding backend served by Ollama."""

    kind = "local"

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        model: str = "nomic-embed-text",
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize Ollama provider.

        Args:
            base_url: Ollama server URL
            model: Embedding model pulled on the server
            timeout_seconds: HTTP timeout for one request
            client: Optional shared client (tests inject a mock transport here)
        """
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.name = f"ollama:{model}"
        self._timeout = httpx.Timeout(timeout_seconds)
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def embed_query(self, text: str) -> list[float]:
        url = f"{self.base_url}/api/embeddings"
        try:
            response = await self._get_client().post(
                url,
                json={"model": self.model, "prompt": text},
            )
        except httpx.HTTPError as e:
            raise EmbeddingError(
                f"Ollama request failed: {type(e).__name__}: {e}",
                provider=self.kind,
                details={"url": url},
            ) from e

        if response.status_code != 200:
            raise EmbeddingError(
                f"Ollama returned HTTP {response.status_code}",
                provider=self.kind,
                details={"url": url, "status_code": response.status_code},
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise EmbeddingError(
                "Ollama returned a non-JSON body", provider=self.kind
            ) from e

        embedding = payload.get("embedding") if isinstance(payload, dict) else None
        if not isinstance(embedding, list) or not embedding:
            raise EmbeddingError(
                "Ollama response has no embedding",
                provider=self.kind,
                details={"model": self.model},
            )
        try:
            return [float(value) for value in embedding]
        except (TypeError, ValueError) as e:
            raise EmbeddingError(
                "Ollama response has a non-numeric embedding",
                provider=self.kind,
                details={"model": self.model},
            ) from e

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
