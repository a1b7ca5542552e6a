"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation and update.
- ``CustomerDTO``: output returned by the service.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation and update requests.

    Validates:
    - ``name`` and ``phone`` are not blank (surrounding whitespace is
      stripped) and fit their columns (255 and 20 characters).
    - ``email`` is a well-formed address (Pydantic ``EmailStr``).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(max_length=255)
    email: EmailStr
    phone: str = Field(max_length=20)

    @field_validator("name", "phone")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field must not be blank.")
        return v


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class CustomerDTO(BaseModel):
    """Immutable DTO for customer responses.

    ``service_orders`` is reserved for the ids of the customer's service
    orders; nothing fills it yet.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    phone: str
    service_orders: Optional[List[int]] = None
