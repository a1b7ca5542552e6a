"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising — the Service Layer decides how to translate a
missing entity into a domain error.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Customer.objects.filter(pk=id).first()
        except (TypeError, ValueError, ValidationError):
            return None

    def find_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address."""
        return Customer.objects.filter(email=email).first()

    @transaction.atomic
    def add(self, entity: Customer) -> Customer:
        """Insert a new customer; the database assigns ``id``."""
        if entity.pk == 0:
            entity.pk = None
        entity.save(force_insert=True)
        logger.info("customer.saved", customer_id=entity.id, is_new=True)
        return entity

    @transaction.atomic
    def update(self, entity: Customer) -> Customer:
        """Write the current field values of a stored customer."""
        entity.save(force_update=True)
        logger.info("customer.saved", customer_id=entity.id, is_new=False)
        return entity

    @transaction.atomic
    def delete(self, entity: Customer) -> bool:
        """Hard-delete a customer.

        Returns ``False`` if no row matched the entity.
        """
        customer_id = entity.id
        if customer_id is None:
            return False
        count, _ = Customer.objects.filter(pk=customer_id).delete()
        if not count:
            return False
        logger.info("customer.removed", customer_id=customer_id)
        return True
