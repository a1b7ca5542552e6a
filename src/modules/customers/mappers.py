"""Entity <-> DTO mapping for customers.

The service receives an ``ICustomerMapper`` by injection; ``CustomerMapper``
is the hand-written implementation used in production.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from modules.customers.dtos import CreateCustomerDTO, CustomerDTO
from modules.customers.models import Customer


class ICustomerMapper(ABC):
    """Mapping contract between ``Customer`` and its DTOs."""

    @abstractmethod
    def to_dto(self, customer: Customer) -> CustomerDTO:
        """Build the output DTO for a stored customer."""

    @abstractmethod
    def to_entity(self, dto: CreateCustomerDTO) -> Customer:
        """Build a new, unsaved customer from an input DTO."""


class CustomerMapper(ICustomerMapper):
    """Field-by-field mapping of name, email and phone."""

    def to_dto(self, customer: Customer) -> CustomerDTO:
        return CustomerDTO(
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
        )

    def to_entity(self, dto: CreateCustomerDTO) -> Customer:
        return Customer(name=dto.name, email=dto.email, phone=dto.phone)
