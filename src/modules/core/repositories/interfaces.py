"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).  Look-ups return ``None`` for
    missing records instead of raising.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def add(self, entity: T) -> T:
        """Persist a new entity; the identifier is assigned here."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Persist changes made to an already stored entity."""

    @abstractmethod
    def delete(self, entity: T) -> bool:
        """Remove the given entity.

        Returns ``False`` when the entity was not stored.
        """
