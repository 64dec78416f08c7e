"""Product service layer (Use Cases).

Delegates persistence to the injected ``IProductRepository`` and turns an
absent product into ``ProductNotFound``.  That is the only outcome this
layer manufactures; storage errors pass through untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import ProductDTO, ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, data: ProductInputDTO) -> ProductDTO:
        """Persist a new product; the store assigns its id."""
        product = self._repo.create(data)
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    def update_product(self, id: int, data: ProductInputDTO) -> ProductDTO:
        """Replace all mutable fields of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.update(id, data)
        if product is None:
            logger.info("product.not_found", product_id=id, operation="update")
            raise ProductNotFound(id)
        logger.info("product.updated", product_id=id)
        return product

    def delete_product(self, id: int) -> None:
        """Hard-delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.delete_by_id(id):
            logger.info("product.not_found", product_id=id, operation="delete")
            raise ProductNotFound(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductDTO]:
        return self._repo.list_all()

    def get_product(self, id: int) -> ProductDTO:
        """Retrieve a single product by id.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.find_by_id(id)
        if product is None:
            logger.info("product.not_found", product_id=id, operation="get")
            raise ProductNotFound(id)
        return product
