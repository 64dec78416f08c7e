"""Product repository interface."""

from __future__ import annotations

from modules.core.repositories.interfaces import IRepository
from modules.products.dtos import ProductDTO, ProductInputDTO


class IProductRepository(IRepository[ProductDTO, ProductInputDTO]):
    """Repository contract for the Product entity.

    Adds nothing to the generic contract; it exists so services can be
    typed against a product-specific abstraction.
    """
