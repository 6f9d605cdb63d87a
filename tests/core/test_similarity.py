"""
Test suite for the similarity engine.

Covers cosine similarity bounds, zero-vector sentinel, zero-padding of
mismatched lengths, and stable top-K ranking.

System role: Verification of relevance scoring
"""

import math

import pytest

from study_rag.boundary.vdb import ChunkRecord, make_chunk_id
from study_rag.core.fallback_embedder import fallback_embed
from study_rag.core.similarity import (
    ZERO_NORM_SIMILARITY,
    cosine_similarity,
    rank_chunks,
)


def _record(index: int, embedding: list[float], document_id: str = "doc") -> ChunkRecord:
    return ChunkRecord(
        id=make_chunk_id(document_id, index),
        text=f"chunk {index}",
        embedding=embedding,
        document_id=document_id,
        chunk_index=index,
    )


class TestCosineSimilarity:
    """Test suite for cosine_similarity."""

    def test_identical_vectors_should_score_one(self) -> None:
        vector = [0.3, -1.2, 4.0]
        assert cosine_similarity(vector, vector) == pytest.approx(1.0)

    def test_orthogonal_vectors_should_score_zero(self) -> None:
        assert cosine_similarity([1.0, 0.0], [0.0, 5.0]) == pytest.approx(0.0)

    def test_opposite_vectors_should_score_minus_one(self) -> None:
        assert cosine_similarity([1.0, 2.0, 3.0], [-1.0, -2.0, -3.0]) == pytest.approx(-1.0)

    def test_zero_vector_should_return_sentinel_not_nan(self) -> None:
        """A zero-norm input yields the documented sentinel."""
        result = cosine_similarity([0.0, 0.0, 0.0], [1.0, 2.0, 3.0])
        assert not math.isnan(result)
        assert result == ZERO_NORM_SIMILARITY == 0.0

    def test_two_zero_vectors_should_return_sentinel(self) -> None:
        assert cosine_similarity([0.0], [0.0]) == ZERO_NORM_SIMILARITY

    def test_empty_vector_should_return_sentinel(self) -> None:
        assert cosine_similarity([], [1.0]) == ZERO_NORM_SIMILARITY

    def test_mismatched_lengths_should_zero_pad(self) -> None:
        """A length-300 and a length-384 vector compare via zero-padding."""
        short = fallback_embed("cell energy powerhouse")[:300]
        long = fallback_embed("cell energy powerhouse")
        result = cosine_similarity(short, long)
        assert -1.0 <= result <= 1.0
        assert not math.isnan(result)

    def test_zero_padding_should_not_change_score(self) -> None:
        """Trailing zeros do not affect similarity."""
        assert cosine_similarity([1.0, 2.0], [1.0, 2.0, 0.0, 0.0]) == pytest.approx(1.0)

    def test_inputs_should_not_be_mutated(self) -> None:
        """Padding happens without touching caller lists."""
        a = [1.0, 2.0]
        b = [1.0, 2.0, 3.0]
        cosine_similarity(a, b)
        assert a == [1.0, 2.0]
        assert b == [1.0, 2.0, 3.0]


class TestRankChunks:
    """Test suite for rank_chunks."""

    def test_rank_chunks_should_return_top_k_descending(self) -> None:
        """Highest-similarity chunks come first, truncated to top_k."""
        chunks = [
            _record(0, [0.0, 1.0]),
            _record(1, [1.0, 0.0]),
            _record(2, [1.0, 1.0]),
        ]

        results = rank_chunks(chunks, [1.0, 0.0], top_k=2)

        assert [r.chunk_index for r in results] == [1, 2]
        assert results[0].similarity == pytest.approx(1.0)
        assert results[1].similarity == pytest.approx(1 / math.sqrt(2))

    def test_rank_chunks_should_break_ties_by_chunk_order(self) -> None:
        """Equal scores keep original order (stable sort)."""
        chunks = [_record(i, [1.0, 0.0]) for i in range(4)]

        results = rank_chunks(chunks, [2.0, 0.0], top_k=4)

        assert [r.chunk_index for r in results] == [0, 1, 2, 3]

    def test_rank_chunks_should_annotate_results(self) -> None:
        """Results carry text, chunk index and owning document."""
        results = rank_chunks([_record(0, [1.0], document_id="notes")], [1.0])

        assert results[0].text == "chunk 0"
        assert results[0].document_id == "notes"
        assert results[0].chunk_index == 0

    def test_rank_chunks_should_default_to_five_results(self) -> None:
        chunks = [_record(i, [1.0, float(i)]) for i in range(8)]
        assert len(rank_chunks(chunks, [1.0, 1.0])) == 5

    def test_rank_chunks_should_handle_empty_input(self) -> None:
        assert rank_chunks([], [1.0]) == []
