"""Product DTOs shared by the store, service and API layers.

Framework-agnostic data transfer objects using Pydantic v2.  DTOs are
immutable (``frozen=True``).

- ``ProductInputDTO``: coerced request body for create and full update.
- ``ProductDTO``: plain snapshot of a persisted product.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from modules.products.models import Product


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ProductInputDTO(BaseModel):
    """Immutable DTO for create and update request bodies.

    Only type coercion happens here.  Unknown keys are dropped, so a
    client-supplied ``id`` never reaches the store.  PUT replaces every
    mutable field, which is why omitted optional fields fall back to their
    defaults instead of keeping the stored value.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    description: Optional[str] = None
    price: Decimal = Decimal("0")
    quantity: int = 0


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductDTO(BaseModel):
    """Immutable snapshot of a stored product."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: Optional[str]
    price: Decimal
    quantity: int

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        """Build a DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            quantity=product.quantity,
        )
