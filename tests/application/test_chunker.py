"""
Test suite for TextChunker.

System role: Verification of document chunking
"""

import pytest

from study_rag.application.chunker import TextChunker


class TestSentenceStrategy:
    """Test suite for the sentence packing strategy."""

    def test_sentences_should_pack_up_to_chunk_size_with_word_overlap(self) -> None:
        """chunk_overlap=20 carries the last two words into the next chunk."""
        # Arrange
        chunker = TextChunker(chunk_size=30, chunk_overlap=20)
        text = "One two three. Four five six. Seven eight nine."

        # Act
        chunks = chunker.chunk(text)

        # Assert
        assert chunks == ["One two three. Four five six.", "five six. Seven eight nine."]

    def test_short_text_should_produce_single_chunk(self) -> None:
        chunker = TextChunker()

        assert chunker.chunk("Cells are small. DNA is long.") == ["Cells are small. DNA is long."]

    def test_zero_overlap_should_not_carry_words(self) -> None:
        chunker = TextChunker(chunk_size=20, chunk_overlap=5)

        chunks = chunker.chunk("Alpha beta gamma. Delta epsilon zeta.")

        assert chunks == ["Alpha beta gamma.", "Delta epsilon zeta."]

    def test_oversized_sentence_should_be_kept_whole(self) -> None:
        chunker = TextChunker(chunk_size=10, chunk_overlap=0)

        chunks = chunker.chunk("This sentence is much longer than ten characters.")

        assert chunks == ["This sentence is much longer than ten characters."]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_should_produce_no_chunks(self, text) -> None:
        assert TextChunker().chunk(text) == []


class TestRecursiveStrategy:
    """Test suite for the recursive character strategy."""

    def test_recursive_chunks_should_respect_chunk_size(self) -> None:
        # Arrange
        chunker = TextChunker(chunk_size=50, chunk_overlap=10, strategy="recursive")
        text = " ".join(f"word{i}" for i in range(100))

        # Act
        chunks = chunker.chunk(text)

        # Assert
        assert len(chunks) > 1
        assert all(len(c) <= 50 for c in chunks)
        assert all(c.strip() == c and c for c in chunks)
        assert chunks[0].startswith("word0")
        assert chunks[-1].endswith("word99")

    def test_overlap_larger_than_size_should_be_accepted(self) -> None:
        chunker = TextChunker(chunk_size=20, chunk_overlap=200, strategy="recursive")

        assert chunker.chunk("short text") == ["short text"]


class TestChunkerValidation:
    """Test suite for constructor validation."""

    def test_unknown_strategy_should_raise(self) -> None:
        with pytest.raises(ValueError, match="Unknown chunk strategy"):
            TextChunker(strategy="semantic")

    def test_non_positive_size_should_raise(self) -> None:
        with pytest.raises(ValueError, match="chunk_size"):
            TextChunker(chunk_size=0)
