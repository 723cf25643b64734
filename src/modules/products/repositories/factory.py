"""Process-wide Product repository provider.

The backend is chosen by ``settings.DOCUMENT_STORE_BACKEND`` and built on
first use, so importing the views never opens a Firestore connection.  A
backend that cannot be built raises ``DocumentStoreError`` and is retried
on the next call.
"""

from __future__ import annotations

from functools import lru_cache

import structlog
from django.conf import settings

from modules.products.exceptions import DocumentStoreError
from modules.products.repositories.firestore_repository import (
    FirestoreProductRepository,
)
from modules.products.repositories.interfaces import IProductRepository
from modules.products.repositories.memory_repository import InMemoryProductRepository

logger = structlog.get_logger(__name__)


@lru_cache(maxsize=None)
def get_product_repository() -> IProductRepository:
    backend = settings.DOCUMENT_STORE_BACKEND
    collection = settings.PRODUCTS_COLLECTION

    if backend == "memory":
        repo: IProductRepository = InMemoryProductRepository(collection_name=collection)
    elif backend == "firestore":
        repo = FirestoreProductRepository(
            collection_name=collection,
            project=settings.FIRESTORE_PROJECT,
            database=settings.FIRESTORE_DATABASE,
        )
    else:
        raise DocumentStoreError(
            f"Unknown DOCUMENT_STORE_BACKEND {backend!r}; use 'firestore' or 'memory'."
        )

    logger.info("product_repository.ready", backend=backend, collection=collection)
    return repo
