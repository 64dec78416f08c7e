"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
(or ``False``) for missing rows instead of raising, and the Service Layer
decides how to translate absence into an API response.  Database errors
are never caught here.

Each mutation runs inside its own ``transaction.atomic()`` block, so a
create, update or delete either commits completely or not at all.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.products.dtos import ProductDTO, ProductInputDTO
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def list_all(self) -> List[ProductDTO]:
        """Return all products ordered by id."""
        return [ProductDTO.from_entity(p) for p in Product.objects.order_by("id")]

    def find_by_id(self, id: int) -> Optional[ProductDTO]:
        product = Product.objects.filter(id=id).first()
        if product is None:
            return None
        return ProductDTO.from_entity(product)

    def create(self, data: ProductInputDTO) -> ProductDTO:
        """Insert a new row and return it as stored.

        The row is re-read after the insert so the snapshot reflects the
        column types (e.g. price rounded to two decimal places).
        """
        with transaction.atomic():
            product = Product(
                name=data.name,
                description=data.description,
                price=data.price,
                quantity=data.quantity,
            )
            product.save(force_insert=True)
            product.refresh_from_db()
        logger.debug("product.inserted", product_id=product.id)
        return ProductDTO.from_entity(product)

    def update(self, id: int, data: ProductInputDTO) -> Optional[ProductDTO]:
        """Overwrite every mutable field of an existing row.

        Returns ``None`` without touching the table when ``id`` is unknown.
        """
        with transaction.atomic():
            product = Product.objects.filter(id=id).first()
            if product is None:
                return None
            product.name = data.name
            product.description = data.description
            product.price = data.price
            product.quantity = data.quantity
            product.save(update_fields=["name", "description", "price", "quantity"])
            product.refresh_from_db()
        logger.debug("product.row_updated", product_id=product.id)
        return ProductDTO.from_entity(product)

    def delete_by_id(self, id: int) -> bool:
        """Hard-delete a product by id.

        Returns ``True`` if a row was removed, ``False`` if none matched.
        """
        with transaction.atomic():
            deleted, _ = Product.objects.filter(id=id).delete()
        if deleted:
            logger.debug("product.row_deleted", product_id=id)
        return deleted > 0
