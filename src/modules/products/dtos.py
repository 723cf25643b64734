"""Product DTOs for the Service Layer.

Data transfer objects using Pydantic v2.

- ``ProductDocument``: the raw, schema-less field map stored in the
  ``products`` collection.  ``create`` stores it unmodified, ``get_one``
  returns it unmodified and ``update_one`` merges a partial one.
- ``ProductOutputDTO``: the typed four-field Product used by the list
  endpoint.  It reads exactly ``name``, ``price``, ``retailer`` and
  ``amountInStock`` and drops every other stored field.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

ProductDocument = Dict[str, Any]

PRODUCT_FIELDS = ("name", "price", "retailer", "amountInStock")


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product list responses.

    Values are passed through as stored; documents written without one of
    the four fields come back with ``None`` for it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: Any = None
    price: Any = None
    retailer: Any = None
    amount_in_stock: Any = Field(default=None, alias="amountInStock")

    @classmethod
    def from_document(cls, id: str, data: ProductDocument) -> ProductOutputDTO:
        """Build an output DTO from a stored document, ignoring extra fields."""
        return cls(id=id, **{field: data.get(field) for field in PRODUCT_FIELDS})

    def to_representation(self) -> Dict[str, Any]:
        """Wire form with ``amountInStock`` spelled the way clients send it."""
        return self.model_dump(by_alias=True)
