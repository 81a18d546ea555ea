"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and re-raised as DRF exceptions; the
standardized exception handler renders them, so the view never builds
error bodies itself and never swallows generic exceptions.
"""

from __future__ import annotations

from typing import Any, Mapping

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import Conflict
from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerNotFound,
    InvalidCustomerRequest,
)
from modules.customers.repositories import get_customer_repository
from modules.customers.serializers import (
    CustomerRegistrationSerializer,
    CustomerSerializer,
    CustomerUpdateSerializer,
)
from modules.customers.services import CustomerService


def _request_body(request: Request) -> Mapping[str, Any]:
    data = request.data
    if not isinstance(data, Mapping):
        raise ValidationError({"non_field_errors": ["Expected a JSON object."]})
    return data


def _to_drf_error(exc: PydanticValidationError) -> ValidationError:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
        errors.setdefault(field, []).append(error["msg"])
    return ValidationError(errors)


class CustomerViewSet(ViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with the configured repository (DIP).
    All storage access goes through the service/repository layer.
    """

    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=get_customer_repository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=CustomerSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /api/v1/customer"""
        customers = self._service.list_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    @extend_schema(responses=CustomerSerializer)
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/v1/customer/{pk}"""
        try:
            customer = self._service.get_customer(int(pk))
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=CustomerRegistrationSerializer, responses=CustomerSerializer)
    def create(self, request: Request) -> Response:
        """POST /api/v1/customer"""
        data = _request_body(request)

        try:
            dto = CreateCustomerDTO.model_validate(dict(data))
        except PydanticValidationError as exc:
            raise _to_drf_error(exc) from exc

        try:
            customer = self._service.register_customer(dto)
        except CustomerAlreadyExists as exc:
            raise Conflict(str(exc)) from exc

        return Response(CustomerSerializer(customer).data)

    @extend_schema(request=CustomerUpdateSerializer, responses=CustomerSerializer)
    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/v1/customer/{pk}"""
        data = _request_body(request)

        try:
            dto = UpdateCustomerDTO.model_validate(dict(data))
        except PydanticValidationError as exc:
            raise _to_drf_error(exc) from exc

        try:
            customer = self._service.update_customer(int(pk), dto)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        except CustomerAlreadyExists as exc:
            raise Conflict(str(exc)) from exc
        except InvalidCustomerRequest as exc:
            raise ValidationError({"non_field_errors": [str(exc)]}) from exc

        return Response(CustomerSerializer(customer).data)

    @extend_schema(request=CustomerUpdateSerializer, responses=CustomerSerializer)
    def partial_update(self, request: Request, pk: str) -> Response:
        """PATCH /api/v1/customer/{pk}"""
        return self.update(request, pk)

    @extend_schema(responses={200: None})
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/v1/customer/{pk}"""
        try:
            self._service.delete_customer(int(pk))
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        return Response()
