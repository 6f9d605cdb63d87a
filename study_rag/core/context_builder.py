"""
Grounded context builder.

Turns ranked chunks into the excerpt block a chat prompt is grounded on.
An empty retrieval is a normal outcome: retrieval still ran (rag_used is
True) but there is no context, only a user-facing notice to reply with.

Dependencies: pydantic, study_rag.boundary.vdb
System role: Bridge between retrieval results and chat prompts
"""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from study_rag.boundary.vdb.vector_schemas import RetrievedChunk

NO_CONTEXT_MESSAGE = (
    "I couldn't find relevant information in your notes for this question. "
    "Try rephrasing or ask about a different topic."
)
EXCERPT_SEPARATOR = "\n\n"


class GroundedContext(BaseModel):
    """Context block handed to the chat prompt builder."""

    context: str = Field(default="", description="Numbered excerpts, empty when nothing matched")
    chunks_found: int = Field(default=0, description="Number of excerpts in the context")
    rag_used: bool = Field(default=True, description="Whether retrieval ran for this request")
    message: str | None = Field(default=None, description="Notice shown when no context was found")
    chunks: list[RetrievedChunk] = Field(default_factory=list)


def format_context(chunks: Sequence[RetrievedChunk]) -> str:
    """
    Render chunks as numbered excerpts.

    Args:
        chunks: Ranked chunks

    Returns:
        str: "[1] text" blocks separated by blank lines
    """
    return EXCERPT_SEPARATOR.join(
        f"[{position}] {chunk.text}" for position, chunk in enumerate(chunks, start=1)
    )


def build_grounded_context(chunks: Sequence[RetrievedChunk]) -> GroundedContext:
    if not chunks:
        return GroundedContext(rag_used=True, message=NO_CONTEXT_MESSAGE)
    return GroundedContext(
        context=format_context(chunks),
        chunks_found=len(chunks),
        rag_used=True,
        chunks=list(chunks),
    )
