"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository`` and entity/DTO
conversion to the injected ``ICustomerMapper``.

Business rules enforced here:
- Email must be unique when a customer is created.
- Get, update and delete require an existing customer.

Update does not re-check email uniqueness against other customers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, CustomerDTO
    from modules.customers.mappers import ICustomerMapper
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` and an ``ICustomerMapper`` via
    constructor injection (DIP).  Holds no state between calls.
    """

    def __init__(
        self, repository: ICustomerRepository, mapper: ICustomerMapper
    ) -> None:
        self._repo = repository
        self._mapper = mapper

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_customer(self, id: int) -> CustomerDTO:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._get_existing(id)
        logger.info("customer.retrieved", customer_id=id)
        return self._mapper.to_dto(customer)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, dto: CreateCustomerDTO) -> None:
        """Create a new customer after enforcing email uniqueness.

        Raises:
            CustomerAlreadyExists: if the email is already taken.
        """
        customer = self._mapper.to_entity(dto)
        log = logger.bind(email=dto.email)

        if self._repo.find_by_email(dto.email):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("Customer already exists")

        customer = self._repo.add(customer)
        log.info("customer.created", customer_id=customer.id)

    def update(self, id: int, dto: CreateCustomerDTO) -> None:
        """Overwrite name, email and phone of an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._get_existing(id)

        customer.name = dto.name
        customer.email = dto.email
        customer.phone = dto.phone

        self._repo.update(customer)
        logger.info("customer.updated", customer_id=id)

    def delete(self, id: int) -> None:
        """Delete an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._get_existing(id)
        self._repo.delete(customer)
        logger.info("customer.deleted", customer_id=id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_existing(self, id: int) -> Customer:
        customer = self._repo.get_by_id(id)
        if not customer:
            logger.warning("customer.not_found", customer_id=id)
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer
