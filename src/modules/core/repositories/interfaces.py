"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T, InputT]``, the identity-keyed CRUD contract that
domain-specific repository interfaces extend.  Service-layer code depends
on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")
InputT = TypeVar("InputT")


class IRepository(ABC, Generic[T, InputT]):
    """Base generic repository contract.

    ``T`` is the snapshot type returned to callers and ``InputT`` the
    payload accepted on writes.  Absence is reported with ``None`` or
    ``False``, never with an exception; storage faults propagate.
    """

    @abstractmethod
    def list_all(self) -> List[T]:
        """Return every stored entity."""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def create(self, data: InputT) -> T:
        """Persist a new entity and return it with its assigned id."""

    @abstractmethod
    def update(self, id: int, data: InputT) -> Optional[T]:
        """Replace the mutable fields of an existing entity."""

    @abstractmethod
    def delete_by_id(self, id: int) -> bool:
        """Remove an entity; ``False`` when nothing matched."""
