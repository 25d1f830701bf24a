"""Fixtures for API tests: an app wired to the in-memory services."""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_admin_service, get_article_service, get_auth_service


@pytest.fixture
def app(auth_service, admin_service, article_service):
    """Create a fresh app for each test with services overridden."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_admin_service] = lambda: admin_service
    app.dependency_overrides[get_article_service] = lambda: article_service
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
