"""
Similarity engine.

Cosine similarity with zero-padding for mismatched vector lengths and
top-K ranking of a document's chunks against a query vector.

Dependencies: study_rag.boundary.vdb.vector_schemas
System role: Relevance scoring for RAG retrieval
"""

import math
from collections.abc import Iterable, Sequence
from itertools import zip_longest

from study_rag.boundary.vdb.vector_schemas import ChunkRecord, RetrievedChunk

# Returned when either vector has zero magnitude
ZERO_NORM_SIMILARITY = 0.0


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.

    The shorter vector is treated as zero-padded to the longer one's length,
    which lets vectors from different embedding providers be compared.
    Inputs are not modified.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: Similarity in [-1.0, 1.0], or ZERO_NORM_SIMILARITY if either
            vector has zero magnitude
    """
    dot_product = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for x, y in zip_longest(a, b, fillvalue=0.0):
        dot_product += x * y
        norm_a += x * x
        norm_b += y * y

    if norm_a == 0.0 or norm_b == 0.0:
        return ZERO_NORM_SIMILARITY

    similarity = dot_product / (math.sqrt(norm_a) * math.sqrt(norm_b))
    # Clamp float drift into [-1, 1]
    return max(-1.0, min(1.0, similarity))


def rank_chunks(
    chunks: Iterable[ChunkRecord],
    query_vector: Sequence[float],
    top_k: int = 5,
) -> list[RetrievedChunk]:
    """
    Rank chunks by similarity to the query vector.

    Sorting is stable, so chunks with equal scores keep their stored order.

    Args:
        chunks: Stored chunk records of one document
        query_vector: Query embedding
        top_k: Maximum number of results

    Returns:
        list[RetrievedChunk]: Best matches in descending similarity order
    """
    scored = [
        RetrievedChunk(
            text=chunk.text,
            similarity=cosine_similarity(query_vector, chunk.embedding),
            chunk_index=chunk.chunk_index,
            document_id=chunk.document_id,
        )
        for chunk in chunks
    ]
    return sort_by_similarity(scored)[:top_k]


def sort_by_similarity(results: Iterable[RetrievedChunk]) -> list[RetrievedChunk]:
    """Stable descending sort on similarity."""
    return sorted(results, key=lambda result: result.similarity, reverse=True)
