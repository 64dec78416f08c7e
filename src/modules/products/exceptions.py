"""Product domain exceptions.

Raised by the Service Layer when a requested product is absent.
The API layer (Views) catches these and translates them into
HTTP responses.  Storage errors are not wrapped here: they propagate
as ``django.db.DatabaseError``.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """No product exists with the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found.")
        self.product_id = product_id
