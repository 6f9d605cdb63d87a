"""
Embedding provider interface.

Dependencies: None
System role: Contract shared by local and cloud embedding backends
"""

from abc import ABC, abstractmethod
from typing import Literal

ProviderKind = Literal["local", "cloud"]


class EmbeddingProvider(ABC):
    """Produces an embedding vector for a single text."""

    kind: ProviderKind
    name: str

    @abstractmethod
    async def embed_query(self, text: str) -> list[float]:
        """
        Embed one text.

        Args:
            text: Non-empty text

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingError: On any provider failure
        """

    async def aclose(self) -> None:
        """Release provider resources."""
        return None
