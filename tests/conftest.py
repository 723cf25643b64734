import pytest

from rest_framework.test import APIClient

from modules.products.repositories.memory_repository import InMemoryProductRepository


@pytest.fixture()
def product_repo():
    """Empty in-memory products collection, fresh for every test."""
    return InMemoryProductRepository()


@pytest.fixture(autouse=True)
def _use_memory_store(monkeypatch, product_repo):
    """Route every view to the in-memory collection instead of Firestore."""
    monkeypatch.setattr(
        "modules.products.views.get_product_repository", lambda: product_repo
    )
    monkeypatch.setattr(
        "modules.core.views.get_product_repository", lambda: product_repo
    )


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid
