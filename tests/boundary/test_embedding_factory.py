"""
Test suite for create_embedding_provider.

System role: Verification of provider selection from settings
"""

from unittest.mock import patch

import pytest

from study_rag.boundary.embeddings import create_embedding_provider
from study_rag.boundary.embeddings.ollama_provider import OllamaEmbeddingProvider
from study_rag.configs import EmbeddingSettings


class TestCreateEmbeddingProvider:
    """Test suite for create_embedding_provider."""

    def test_local_should_build_ollama_provider(self) -> None:
        settings = EmbeddingSettings(
            provider="local",
            ollama_base_url="http://gpu-box:11434",
            ollama_model="mxbai-embed-large",
        )

        provider = create_embedding_provider(settings)

        assert isinstance(provider, OllamaEmbeddingProvider)
        assert provider.base_url == "http://gpu-box:11434"
        assert provider.model == "mxbai-embed-large"
        assert provider.kind == "local"

    def test_cloud_should_build_gemini_provider(self) -> None:
        settings = EmbeddingSettings(provider="cloud", gemini_api_key="key-abc")

        with patch(
            "study_rag.boundary.embeddings.gemini_provider.GoogleGenerativeAIEmbeddings"
        ) as mock_class:
            provider = create_embedding_provider(settings)

        assert provider.kind == "cloud"
        mock_class.assert_called_once_with(
            model="models/text-embedding-004", google_api_key="key-abc"
        )

    def test_unknown_provider_should_raise_value_error(self) -> None:
        settings = EmbeddingSettings.model_construct(provider="openai")

        with pytest.raises(ValueError, match="Invalid EMBEDDING_PROVIDER"):
            create_embedding_provider(settings)
