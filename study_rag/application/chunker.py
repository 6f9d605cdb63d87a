"""
Text chunker with two strategies.

"sentence" packs whole sentences up to chunk_size characters and seeds each
new chunk with the trailing words of the previous one. "recursive" delegates
to LangChain's RecursiveCharacterTextSplitter.

Dependencies: langchain_text_splitters
System role: Turns extracted document text into RAG chunks
"""

import logging
import re
from typing import Literal

from langchain_text_splitters import RecursiveCharacterTextSplitter

logger = logging.getLogger(__name__)

ChunkStrategy = Literal["sentence", "recursive"]

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


class TextChunker:
    """Split document text into chunks for embedding."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        strategy: ChunkStrategy = "sentence",
    ) -> None:
        """
        Initialize chunker.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks. The sentence
                strategy carries over chunk_overlap // 10 words.
            strategy: "sentence" or "recursive"
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        if strategy not in ("sentence", "recursive"):
            raise ValueError(f"Unknown chunk strategy: {strategy}")
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.strategy = strategy
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=min(chunk_overlap, chunk_size - 1),
            length_function=len,
        )

    def chunk(self, text: str) -> list[str]:
        """
        Split text into chunks.

        Args:
            text: Document text

        Returns:
            list[str]: Non-empty chunks in document order, [] for blank text
        """
        if not text or not text.strip():
            return []

        if self.strategy == "recursive":
            chunks = [c.strip() for c in self._splitter.split_text(text) if c.strip()]
        else:
            chunks = self._split_sentences(text)

        logger.info(
            f"{__name__}:chunk - Split text into {len(chunks)} chunks "
            f"(strategy: {self.strategy}, size: {self.chunk_size}, overlap: {self.chunk_overlap})"
        )
        return chunks

    def _split_sentences(self, text: str) -> list[str]:
        overlap_words = self.chunk_overlap // 10
        chunks: list[str] = []
        current = ""

        for sentence in _SENTENCE_BOUNDARY.split(text):
            if len(current + " " + sentence) <= self.chunk_size:
                current = f"{current} {sentence}" if current else sentence
                continue

            if current:
                chunks.append(current.strip())
            carried = current.split(" ")[-overlap_words:] if overlap_words else []
            current = " ".join(carried) + " " + sentence

        if current.strip():
            chunks.append(current.strip())
        return chunks
