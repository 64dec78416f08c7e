"""Product persistence model.

The row type is owned by the repository layer.  Views and services never
receive model instances; they work with the DTOs from ``dtos.py``.

Schema:
- ``name`` is required and unbounded (``TEXT NOT NULL``).
- ``description`` is nullable and capped at 1000 characters by a CHECK
  constraint, so backends that ignore ``varchar`` lengths (SQLite) still
  reject longer values; nothing validates it before the write.
- ``price`` is ``DECIMAL(10, 2)`` and ``quantity`` an integer, both
  defaulting to zero.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models
from django.db.models.functions import Length

models.CharField.register_lookup(Length)

DESCRIPTION_MAX_LENGTH = 1000


class Product(models.Model):
    """A catalog item with an auto-assigned integer identity."""

    id = models.BigAutoField(primary_key=True)
    name = models.TextField()
    description = models.CharField(
        max_length=DESCRIPTION_MAX_LENGTH,
        null=True,
        blank=True,
        default=None,
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0"),
    )
    quantity = models.IntegerField(default=0)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(description__isnull=True)
                | models.Q(description__length__lte=DESCRIPTION_MAX_LENGTH),
                name="products_description_max_1000",
            ),
        ]

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
