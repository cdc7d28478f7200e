"""
API test fixtures.

Provides a TestClient whose RagService dependency is the temp-store
service from the root conftest.
"""

import pytest
from fastapi.testclient import TestClient

from ragindex.api.deps import get_rag_service
from ragindex.api.main import create_app


@pytest.fixture
def app(rag_service):
    application = create_app()
    application.dependency_overrides[get_rag_service] = lambda: rag_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def override_service(app):
    """Swap the injected service, e.g. for a MagicMock raising errors."""

    def _override(service) -> None:
        app.dependency_overrides[get_rag_service] = lambda: service

    return _override
