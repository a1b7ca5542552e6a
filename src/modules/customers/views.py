"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes — the view never swallows generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.mappers import CustomerMapper
from modules.customers.repositories import CustomerDjangoRepository
from modules.customers.services import CustomerService


def _not_found() -> Response:
    return Response(
        {"detail": "Customer not found."},
        status=status.HTTP_404_NOT_FOUND,
    )


def _build_dto(data) -> CreateCustomerDTO:
    """Validate a request body; non-object bodies fail like any bad field."""
    return CreateCustomerDTO.model_validate(data)


class CustomerViewSet(ViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` and
    ``CustomerMapper``.  All ORM access goes through the
    service/repository layer.
    """

    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(
            repository=CustomerDjangoRepository(),
            mapper=CustomerMapper(),
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        try:
            customer = self._service.get_customer(int(pk))
        except CustomerNotFound:
            return _not_found()
        return Response(customer.model_dump())

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        try:
            dto = _build_dto(request.data)
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            self._service.create(dto)
        except CustomerAlreadyExists as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_409_CONFLICT,
            )
        return Response(status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/customers/{pk}/"""
        try:
            dto = _build_dto(request.data)
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            self._service.update(int(pk), dto)
        except CustomerNotFound:
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        try:
            self._service.delete(int(pk))
        except CustomerNotFound:
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)
