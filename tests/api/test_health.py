import pytest
from fastapi.testclient import TestClient

from study_rag.api.deps import get_retrieval_service
from study_rag.api.main import create_app


@pytest.fixture
def client(retrieval_service):
    app = create_app()
    app.dependency_overrides[get_retrieval_service] = lambda: retrieval_service
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_embeddings(client, retrieval_service):
    response = client.get("/api/v1/health/embeddings")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "message": "Embedding layer accessible",
        "provider": "stub:local",
        "provider_kind": "local",
        "document_count": 0,
        "total_chunks": 0,
    }


def test_health_check_should_echo_correlation_id(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "req-42"})
    assert response.headers["X-Correlation-ID"] == "req-42"
