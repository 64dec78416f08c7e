"""Unit tests for the Product model.

Covers:
- Column defaults (price, quantity, description).
- Nullability of ``name``.
- Table name and ordering.
- __str__ representation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.db import IntegrityError

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductDefaults:
    def test_price_and_quantity_default_to_zero(self):
        p = Product.objects.create(name="Bare")
        p.refresh_from_db()
        assert p.price == Decimal("0")
        assert p.quantity == 0
        assert p.description is None

    def test_id_assigned_on_save(self):
        p = Product(name="Unsaved")
        assert p.id is None
        p.save()
        assert isinstance(p.id, int)


class TestProductConstraints:
    def test_name_cannot_be_null(self):
        with pytest.raises(IntegrityError):
            Product.objects.create(name=None)

    def test_description_max_length(self):
        assert Product._meta.get_field("description").max_length == 1000

    def test_price_precision(self):
        field = Product._meta.get_field("price")
        assert field.max_digits == 10
        assert field.decimal_places == 2


class TestProductMeta:
    def test_table_name(self):
        assert Product._meta.db_table == "products"

    def test_default_ordering_is_by_id(self):
        second = Product.objects.create(name="B")
        first = Product.objects.create(name="A")
        assert list(Product.objects.all()) == [second, first]

    def test_str(self):
        p = Product.objects.create(name="Widget")
        assert str(p) == f"#{p.id} - Widget"
