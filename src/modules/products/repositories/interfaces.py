"""Product repository interface.

The Product collection needs nothing beyond the generic document
contract; this class exists so services and tests can depend on a
product-specific abstraction.
"""

from __future__ import annotations

from modules.core.repositories.interfaces import IDocumentRepository


class IProductRepository(IDocumentRepository):
    """Repository contract for the ``products`` collection."""

    collection_name: str = "products"
