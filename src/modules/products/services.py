"""Product service layer (Use Cases).

One method per CRUD verb, each a single call on the injected
``IProductRepository``.  The only checks performed here are presence
checks on the id and payload; anything else the store accepts is stored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, List, Optional

import structlog

from modules.products.dtos import ProductDocument, ProductOutputDTO
from modules.products.exceptions import InvalidProductInput

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _without_id(data: Mapping) -> ProductDocument:
    # Document ids are assigned by the store, never taken from a body.
    return {key: value for key, value in data.items() if key != "id"}


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Holds no state besides the repository.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, product: Any) -> str:
        """Insert ``product`` as a new document and return the generated id.

        Raises:
            InvalidProductInput: if ``product`` is not a field map.
        """
        if not isinstance(product, Mapping):
            raise InvalidProductInput("No product data")

        product_id = self._repo.add(_without_id(product))
        logger.info("product.created", product_id=product_id)
        return product_id

    def update_one(self, id: Optional[str], data: Any) -> None:
        """Merge the fields present in ``data`` into the stored document.

        Raises:
            InvalidProductInput: if ``id`` is falsy or ``data`` carries no fields.
        """
        fields = _without_id(data) if isinstance(data, Mapping) else {}
        if not id or not fields:
            raise InvalidProductInput("No id or data")

        self._repo.update(id, fields)
        logger.info("product.updated", product_id=id, fields=sorted(fields))

    def delete_one(self, id: Optional[str]) -> None:
        """Remove the document; an unknown id is a silent success.

        Raises:
            InvalidProductInput: if ``id`` is falsy.
        """
        if not id:
            raise InvalidProductInput("No id")

        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all(self) -> List[ProductOutputDTO]:
        """Every stored product, reduced to the four Product fields plus id."""
        return [
            ProductOutputDTO.from_document(product_id, data)
            for product_id, data in self._repo.list()
        ]

    def get_one(self, id: Optional[str]) -> Optional[ProductDocument]:
        """Return the raw stored fields, or ``None`` if no such document.

        Raises:
            InvalidProductInput: if ``id`` is falsy.
        """
        if not id:
            raise InvalidProductInput("No id")

        data = self._repo.get_by_id(id)
        if data is None:
            logger.info("product.not_found", product_id=id)
        return data
