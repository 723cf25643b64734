from __future__ import annotations

from unittest.mock import patch

import pytest

from modules.products.exceptions import DocumentStoreError
from modules.products.repositories.factory import get_product_repository
from modules.products.repositories.firestore_repository import (
    FirestoreProductRepository,
)
from modules.products.repositories.memory_repository import InMemoryProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _clear_cache():
    get_product_repository.cache_clear()
    yield
    get_product_repository.cache_clear()


def test_memory_backend(settings):
    settings.DOCUMENT_STORE_BACKEND = "memory"
    settings.PRODUCTS_COLLECTION = "catalog"

    repo = get_product_repository()

    assert isinstance(repo, InMemoryProductRepository)
    assert repo.collection_name == "catalog"


def test_repository_is_built_once(settings):
    settings.DOCUMENT_STORE_BACKEND = "memory"

    assert get_product_repository() is get_product_repository()


def test_firestore_backend(settings):
    settings.DOCUMENT_STORE_BACKEND = "firestore"
    settings.FIRESTORE_PROJECT = "demo"
    settings.FIRESTORE_DATABASE = "(default)"

    with patch(
        "modules.products.repositories.firestore_repository.firestore.Client"
    ) as client_cls:
        repo = get_product_repository()

    assert isinstance(repo, FirestoreProductRepository)
    client_cls.assert_called_once_with(project="demo", database="(default)")


def test_unknown_backend(settings):
    settings.DOCUMENT_STORE_BACKEND = "mongo"

    with pytest.raises(DocumentStoreError, match="mongo"):
        get_product_repository()


def test_failed_build_is_not_cached(settings):
    settings.DOCUMENT_STORE_BACKEND = "mongo"
    with pytest.raises(DocumentStoreError):
        get_product_repository()

    settings.DOCUMENT_STORE_BACKEND = "memory"

    assert isinstance(get_product_repository(), InMemoryProductRepository)
