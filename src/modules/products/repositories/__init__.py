"""Product repositories package."""

from modules.products.repositories.factory import get_product_repository
from modules.products.repositories.firestore_repository import (
    FirestoreProductRepository,
)
from modules.products.repositories.interfaces import IProductRepository
from modules.products.repositories.memory_repository import InMemoryProductRepository

__all__ = [
    "FirestoreProductRepository",
    "IProductRepository",
    "InMemoryProductRepository",
    "get_product_repository",
]
