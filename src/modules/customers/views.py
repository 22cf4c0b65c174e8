"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.  Every
route acting on ``/clientes/:id`` runs the access guard first; domain
exceptions propagate to ``modules.core.handlers.api_exception_handler``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.constants import UUID_PATH_REGEX, Role
from modules.core.dtos import LoginDTO, parse_dto
from modules.core.permissions import require_principal
from modules.customers.dtos import RegisterCustomerDTO, UpdateCustomerDTO
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import (
    CustomerDjangoRepository,
    InterestDjangoRepository,
)
from modules.customers.serializers import CustomerSerializer, InterestSerializer
from modules.customers.services import CustomerService
from modules.flavors.repositories.django_repository import FlavorDjangoRepository


class CustomerViewSet(GenericViewSet):
    """``/clientes`` resource.

    Does **not** extend ``ModelViewSet``: all ORM access goes through the
    service/repository layer.
    """

    queryset = Customer.objects.none()
    serializer_class = CustomerSerializer
    lookup_value_regex = UUID_PATH_REGEX

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(
            repository=CustomerDjangoRepository(),
            interest_repository=InterestDjangoRepository(),
            flavor_repository=FlavorDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    @action(detail=False, methods=["post"], permission_classes=[AllowAny], authentication_classes=[])
    def register(self, request: Request) -> Response:
        """POST /api/v1/clientes/register"""
        dto = parse_dto(RegisterCustomerDTO, request.data)
        customer, token = self._service.register(dto)
        return Response(
            {"cliente": CustomerSerializer(customer).data, "token": token},
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["post"], permission_classes=[AllowAny], authentication_classes=[])
    def login(self, request: Request) -> Response:
        """POST /api/v1/clientes/login"""
        dto = parse_dto(LoginDTO, request.data)
        customer, token = self._service.login(dto)
        return Response({"cliente": CustomerSerializer(customer).data, "token": token})

    # ------------------------------------------------------------------
    # Self CRUD
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/v1/clientes/{pk}"""
        require_principal(request.user, Role.CUSTOMER, pk)
        return Response(CustomerSerializer(self._service.get_customer(pk)).data)

    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/v1/clientes/{pk}"""
        require_principal(request.user, Role.CUSTOMER, pk)
        dto = parse_dto(UpdateCustomerDTO, request.data)
        customer = self._service.update_customer(pk, dto)
        return Response(CustomerSerializer(customer).data)

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/v1/clientes/{pk}"""
        require_principal(request.user, Role.CUSTOMER, pk)
        self._service.delete_customer(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Interest
    # ------------------------------------------------------------------

    @action(
        detail=True,
        methods=["post"],
        url_path=rf"sabores/(?P<flavor_id>{UUID_PATH_REGEX})/interesse",
    )
    def interest(self, request: Request, pk: str, flavor_id: str) -> Response:
        """POST /api/v1/clientes/{pk}/sabores/{flavor_id}/interesse"""
        require_principal(request.user, Role.CUSTOMER, pk)
        interest = self._service.register_interest(pk, flavor_id)
        return Response(InterestSerializer(interest).data, status=status.HTTP_201_CREATED)
