"""In-memory implementation of the Customer repository.

Keeps the exact ``Customer`` instances it receives in a dict keyed by id.
Used by tests and by callers that need the service without a database.
No thread-safety guarantees.
"""

from __future__ import annotations

from typing import Dict, Optional

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository


class InMemoryCustomerRepository(ICustomerRepository):
    """Dict-backed Customer repository with sequential ids starting at 1."""

    def __init__(self) -> None:
        self._items: Dict[int, Customer] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._items)

    def get_by_id(self, id: int) -> Optional[Customer]:
        return self._items.get(id)

    def find_by_email(self, email: str) -> Optional[Customer]:
        return next((c for c in self._items.values() if c.email == email), None)

    def add(self, entity: Customer) -> Customer:
        if not entity.id:
            entity.id = self._next_id
        elif entity.id in self._items:
            raise ValueError(f"Customer {entity.id} is already stored.")
        self._next_id = max(self._next_id, entity.id) + 1
        self._items[entity.id] = entity
        return entity

    def update(self, entity: Customer) -> Customer:
        if entity.id not in self._items:
            raise KeyError(f"Customer {entity.id} is not stored.")
        self._items[entity.id] = entity
        return entity

    def delete(self, entity: Customer) -> bool:
        return self._items.pop(entity.id, None) is not None
