"""
Hashed bag-of-words fallback embedder.

Deterministically maps text to a fixed-dimension unit vector without any
external service, so retrieval keeps working when no embedding provider is
reachable. Vectors are a lexical histogram, not a semantic embedding:
ranking under fallback reflects word overlap only.

The hashing scheme must stay stable; vectors produced here may already be
stored next to vectors produced by a later process.

Dependencies: None (pure domain layer)
System role: Last-resort embedding for degraded retrieval
"""

import math
import re

DEFAULT_DIMENSIONS = 384
MIN_TOKEN_LENGTH = 3

# ASCII word class, same token boundaries as a JavaScript \W split
_TOKEN_SPLIT = re.compile(r"\W+", re.ASCII)


def tokenize(text: str) -> list[str]:
    """
    Lower-case text and split it into tokens of at least three characters.

    Args:
        text: Raw input text

    Returns:
        list[str]: Tokens in order of appearance
    """
    return [token for token in _TOKEN_SPLIT.split(text.lower()) if len(token) >= MIN_TOKEN_LENGTH]


def hash_token(token: str) -> int:
    """
    32-bit signed polynomial rolling hash (h * 31 + code) over UTF-16 code units.

    Args:
        token: Token to hash

    Returns:
        int: Hash in the signed 32-bit range
    """
    value = 0
    encoded = token.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        code = encoded[i] | (encoded[i + 1] << 8)
        value = ((value << 5) - value + code) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def fallback_embed(text: str, dimensions: int = DEFAULT_DIMENSIONS) -> list[float]:
    """
    Embed text as an L2-normalized hashed token histogram.

    Args:
        text: Text to embed
        dimensions: Output vector length

    Returns:
        list[float]: Unit vector, or all zeros when no token survives filtering
    """
    vector = [0.0] * dimensions
    for token in tokenize(text):
        vector[abs(hash_token(token)) % dimensions] += 1.0

    magnitude = math.sqrt(sum(value * value for value in vector))
    if magnitude > 0:
        vector = [value / magnitude for value in vector]
    return vector


class FallbackEmbedder:
    """Fallback embedder bound to a fixed dimension."""

    def __init__(self, dimensions: int = DEFAULT_DIMENSIONS) -> None:
        if dimensions < 1:
            raise ValueError(f"dimensions must be positive, got {dimensions}")
        self.dimensions = dimensions

    def embed(self, text: str) -> list[float]:
        return fallback_embed(text, self.dimensions)
