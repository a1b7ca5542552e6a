"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class CustomerError(Exception):
    """Base class for every failure the customer service signals.

    ``code`` names the failure kind so callers can dispatch on it.
    """

    code = "customer_error"


class CustomerNotFound(CustomerError):
    """The requested customer does not exist."""

    code = "not_found"


class CustomerAlreadyExists(CustomerError):
    """A customer with the same email already exists."""

    code = "conflict"

    def __init__(self, message: str = "Customer already exists") -> None:
        super().__init__(message)
