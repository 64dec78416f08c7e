"""Unit tests for the Product output serializer."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.dtos import ProductDTO
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


def _dto(**overrides) -> ProductDTO:
    defaults = {
        "id": 1,
        "name": "Widget",
        "description": "A widget",
        "price": Decimal("9.99"),
        "quantity": 5,
    }
    defaults.update(overrides)
    return ProductDTO(**defaults)


class TestSerializerFields:
    def test_expected_fields(self):
        serializer = ProductSerializer()
        assert set(serializer.fields.keys()) == {
            "id",
            "name",
            "description",
            "price",
            "quantity",
        }

    def test_id_is_read_only(self):
        assert ProductSerializer().fields["id"].read_only is True


class TestSerialization:
    def test_serializes_dto(self):
        data = ProductSerializer(_dto()).data
        assert data == {
            "id": 1,
            "name": "Widget",
            "description": "A widget",
            "price": "9.99",
            "quantity": 5,
        }

    def test_null_description(self):
        data = ProductSerializer(_dto(description=None)).data
        assert data["description"] is None

    def test_zero_price_has_two_places(self):
        data = ProductSerializer(_dto(price=Decimal("0"))).data
        assert data["price"] == "0.00"

    def test_many(self):
        data = ProductSerializer([_dto(id=1), _dto(id=2)], many=True).data
        assert [item["id"] for item in data] == [1, 2]
