"""Establishment API views.

Every route acting on ``/estabelecimentos/:id`` runs the access guard
first; domain exceptions propagate to the project exception handler.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.constants import UUID_PATH_REGEX, Role
from modules.core.dtos import EstablishmentLoginDTO, parse_dto
from modules.core.pagination import PageRequest, paginated_payload
from modules.core.permissions import require_principal
from modules.couriers.repositories.django_repository import CourierDjangoRepository
from modules.establishments.dtos import RegisterEstablishmentDTO, UpdateEstablishmentDTO
from modules.establishments.models import Establishment
from modules.establishments.repositories.django_repository import (
    AssociationDjangoRepository,
    EstablishmentDjangoRepository,
)
from modules.establishments.serializers import (
    CourierAssociationSerializer,
    EstablishmentSerializer,
)
from modules.establishments.services import EstablishmentService


class EstablishmentViewSet(GenericViewSet):
    """``/estabelecimentos`` resource."""

    queryset = Establishment.objects.none()
    serializer_class = EstablishmentSerializer
    lookup_value_regex = UUID_PATH_REGEX

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = EstablishmentService(
            repository=EstablishmentDjangoRepository(),
            association_repository=AssociationDjangoRepository(),
            courier_repository=CourierDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    @action(detail=False, methods=["post"], permission_classes=[AllowAny], authentication_classes=[])
    def register(self, request: Request) -> Response:
        """POST /api/v1/estabelecimentos/register"""
        dto = parse_dto(RegisterEstablishmentDTO, request.data)
        establishment, token = self._service.register(dto)
        return Response(
            {"estabelecimento": EstablishmentSerializer(establishment).data, "token": token},
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["post"], permission_classes=[AllowAny], authentication_classes=[])
    def login(self, request: Request) -> Response:
        """POST /api/v1/estabelecimentos/login"""
        dto = parse_dto(EstablishmentLoginDTO, request.data)
        establishment, token = self._service.login(dto)
        return Response(
            {"estabelecimento": EstablishmentSerializer(establishment).data, "token": token}
        )

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/estabelecimentos?page&limit"""
        page = self._service.list_establishments(PageRequest.from_query(request.query_params))
        return Response(paginated_payload(page, EstablishmentSerializer))

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/v1/estabelecimentos/{pk}"""
        require_principal(request.user, Role.ESTABLISHMENT, pk)
        return Response(EstablishmentSerializer(self._service.get_establishment(pk)).data)

    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/v1/estabelecimentos/{pk}"""
        require_principal(request.user, Role.ESTABLISHMENT, pk)
        dto = parse_dto(UpdateEstablishmentDTO, request.data)
        establishment = self._service.update_establishment(pk, dto)
        return Response(EstablishmentSerializer(establishment).data)

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/v1/estabelecimentos/{pk}"""
        require_principal(request.user, Role.ESTABLISHMENT, pk)
        self._service.delete_establishment(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Couriers
    # ------------------------------------------------------------------

    @action(detail=True, methods=["get"], url_path="entregadores")
    def couriers(self, request: Request, pk: str) -> Response:
        """GET /api/v1/estabelecimentos/{pk}/entregadores"""
        require_principal(request.user, Role.ESTABLISHMENT, pk)
        page = self._service.list_associations(pk, PageRequest.from_query(request.query_params))
        return Response(paginated_payload(page, CourierAssociationSerializer))

    @action(
        detail=True,
        methods=["post"],
        url_path=rf"entregadores/(?P<courier_id>{UUID_PATH_REGEX})/aprovar",
    )
    def approve_courier(self, request: Request, pk: str, courier_id: str) -> Response:
        """POST /api/v1/estabelecimentos/{pk}/entregadores/{courier_id}/aprovar"""
        require_principal(request.user, Role.ESTABLISHMENT, pk)
        association = self._service.approve_courier(pk, courier_id)
        return Response(CourierAssociationSerializer(association).data)
