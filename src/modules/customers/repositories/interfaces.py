"""Customer repository interface.

Extends ``IRepository[Customer]`` with the e-mail look-up the service
needs to keep customer e-mails unique on creation.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address."""
