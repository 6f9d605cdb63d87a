"""Study assistant RAG service: chunking, embeddings, in-memory vector retrieval."""

__version__ = "0.1.0"
