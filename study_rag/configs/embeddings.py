"""
Embedding provider configuration settings.

Selects between the local Ollama endpoint and the Google Gemini cloud
embeddings, and makes the failure policy of each explicit.

Dependencies: pydantic, pydantic_settings
System role: Embedding provider configuration for RAG ingestion and retrieval
"""

from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

from study_rag.configs.base import env_config

PROVIDER_ALIASES = {
    "local": "local",
    "ollama": "local",
    "cloud": "cloud",
    "gemini": "cloud",
}


class EmbeddingSettings(BaseSettings):
    """Embedding configuration (Ollama for local dev, Gemini for cloud)."""

    model_config = env_config("EMBEDDING_", populate_by_name=True)

    provider: Literal["local", "cloud"] = Field(
        default="local",
        validation_alias=AliasChoices("EMBEDDING_PROVIDER", "AI_PROVIDER"),
        description="Embedding provider: 'local' (Ollama) or 'cloud' (Gemini)",
    )

    ollama_base_url: str = Field(
        default="http://localhost:11434",
        validation_alias=AliasChoices(
            "EMBEDDING_OLLAMA_BASE_URL", "OLLAMA_BASE_URL"
        ),
        description="Base URL of the local Ollama server",
    )
    ollama_model: str = Field(
        default="nomic-embed-text",
        description="Ollama embedding model name",
    )

    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "EMBEDDING_GEMINI_API_KEY", "GEMINI_API_KEY"
        ),
        description="Google API key for Gemini embeddings",
    )
    gemini_model: str = Field(
        default="models/text-embedding-004",
        description="Google Gemini embedding model ID",
    )

    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound for a single embedding call",
    )
    fallback_dimension: int = Field(
        default=384,
        ge=1,
        description="Dimension of the hashed bag-of-words fallback embedding",
    )

    # Failure policy per provider kind
    fallback_on_local_error: bool = Field(
        default=True,
        description="Substitute the fallback embedding when the local provider fails",
    )
    fallback_on_cloud_error: bool = Field(
        default=False,
        description="Substitute the fallback embedding when the cloud provider fails",
    )

    @field_validator("provider", mode="before")
    @classmethod
    def normalize_provider(cls, value: str) -> str:
        """Map provider aliases (ollama, gemini) onto local/cloud."""
        if isinstance(value, str):
            key = value.strip().lower()
            if key in PROVIDER_ALIASES:
                return PROVIDER_ALIASES[key]
        return value
