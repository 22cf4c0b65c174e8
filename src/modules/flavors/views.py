"""Flavor API views.

- ``/sabores``: public (any principal) catalogue with ``django-filter``.
- ``/estabelecimentos/:id/sabores``: menu management by its owner.
- ``/clientes/:id/cardapio``: the menu, available flavors first.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet

from modules.core.constants import UUID_PATH_REGEX, Role
from modules.core.dtos import AvailabilityDTO, parse_dto
from modules.core.permissions import require_principal
from modules.establishments.repositories.django_repository import (
    EstablishmentDjangoRepository,
)
from modules.flavors.dtos import CreateFlavorDTO, UpdateFlavorDTO
from modules.flavors.filters import FlavorFilter
from modules.flavors.models import Flavor
from modules.flavors.repositories.django_repository import FlavorDjangoRepository
from modules.flavors.serializers import FlavorSerializer
from modules.flavors.services import FlavorService


def _flavor_service() -> FlavorService:
    return FlavorService(
        repository=FlavorDjangoRepository(),
        establishment_repository=EstablishmentDjangoRepository(),
    )


class FlavorViewSet(ListModelMixin, GenericViewSet):
    """Read-only flavor catalogue."""

    filterset_class = FlavorFilter
    ordering_fields = ["name", "price_medium", "price_large", "created_at"]
    ordering = ["name", "id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    queryset = Flavor.objects.all()
    serializer_class = FlavorSerializer
    lookup_value_regex = UUID_PATH_REGEX

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = _flavor_service()

    def get_queryset(self):
        return self._service.list_flavors()

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/v1/sabores/{pk}"""
        return Response(FlavorSerializer(self._service.get_flavor(pk)).data)


class EstablishmentFlavorViewSet(GenericViewSet):
    """Menu management; every route is restricted to the establishment itself."""

    queryset = Flavor.objects.none()
    serializer_class = FlavorSerializer
    lookup_value_regex = UUID_PATH_REGEX

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = _flavor_service()

    def initial(self, request: Request, *args, **kwargs) -> None:
        super().initial(request, *args, **kwargs)
        require_principal(request.user, Role.ESTABLISHMENT, kwargs["establishment_id"])

    def create(self, request: Request, establishment_id: str) -> Response:
        """POST /api/v1/estabelecimentos/{establishment_id}/sabores"""
        dto = parse_dto(CreateFlavorDTO, request.data)
        flavor = self._service.create_flavor(establishment_id, dto)
        return Response(FlavorSerializer(flavor).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, establishment_id: str, pk: str) -> Response:
        """PUT /api/v1/estabelecimentos/{establishment_id}/sabores/{pk}"""
        dto = parse_dto(UpdateFlavorDTO, request.data)
        flavor = self._service.update_flavor(establishment_id, pk, dto)
        return Response(FlavorSerializer(flavor).data)

    def destroy(self, request: Request, establishment_id: str, pk: str) -> Response:
        """DELETE /api/v1/estabelecimentos/{establishment_id}/sabores/{pk}"""
        self._service.delete_flavor(establishment_id, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["put"], url_path="disponibilidade")
    def availability(self, request: Request, establishment_id: str, pk: str) -> Response:
        """PUT /api/v1/estabelecimentos/{establishment_id}/sabores/{pk}/disponibilidade"""
        dto = parse_dto(AvailabilityDTO, request.data)
        flavor = self._service.set_flavor_availability(establishment_id, pk, dto.is_available)
        return Response(FlavorSerializer(flavor).data)


class MenuView(APIView):
    """GET /api/v1/clientes/{customer_id}/cardapio

    Open to any principal; ``?estabelecimento=<id>`` narrows the menu.
    """

    def get(self, request: Request, customer_id: str) -> Response:
        flavors = _flavor_service().menu(request.query_params.get("estabelecimento"))
        return Response(FlavorSerializer(flavors, many=True).data)
