"""Unit tests for ProductOutputDTO."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.products.dtos import ProductOutputDTO

pytestmark = pytest.mark.unit


class TestFromDocument:
    def test_reads_the_four_product_fields(self):
        dto = ProductOutputDTO.from_document(
            "id-1",
            {"name": "Widget", "price": 5, "retailer": "ACME", "amountInStock": 3},
        )
        assert dto.id == "id-1"
        assert dto.name == "Widget"
        assert dto.price == 5
        assert dto.retailer == "ACME"
        assert dto.amount_in_stock == 3

    def test_missing_fields_default_to_none(self):
        dto = ProductOutputDTO.from_document("id-1", {"name": "Widget"})
        assert dto.price is None
        assert dto.retailer is None
        assert dto.amount_in_stock is None

    def test_values_are_not_coerced(self):
        dto = ProductOutputDTO.from_document("id-1", {"price": "12.50"})
        assert dto.price == "12.50"


class TestRepresentation:
    def test_uses_camel_case_stock_field(self):
        dto = ProductOutputDTO.from_document("id-1", {"amountInStock": 7, "color": "red"})
        assert dto.to_representation() == {
            "id": "id-1",
            "name": None,
            "price": None,
            "retailer": None,
            "amountInStock": 7,
        }


class TestImmutability:
    def test_frozen(self):
        dto = ProductOutputDTO(id="id-1", name="Widget")
        with pytest.raises(ValidationError):
            dto.name = "Other"
