"""Courier API views."""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.constants import UUID_PATH_REGEX, Role
from modules.core.dtos import AvailabilityDTO, LoginDTO, parse_dto
from modules.core.pagination import PageRequest, paginated_payload
from modules.core.permissions import require_principal
from modules.couriers.dtos import RegisterCourierDTO, UpdateCourierDTO
from modules.couriers.models import Courier
from modules.couriers.repositories.django_repository import CourierDjangoRepository
from modules.couriers.serializers import CourierSerializer
from modules.couriers.services import CourierService
from modules.establishments.repositories.django_repository import (
    AssociationDjangoRepository,
    EstablishmentDjangoRepository,
)
from modules.establishments.serializers import CourierAssociationSerializer


class CourierViewSet(GenericViewSet):
    """``/entregadores`` resource."""

    queryset = Courier.objects.none()
    serializer_class = CourierSerializer
    lookup_value_regex = UUID_PATH_REGEX

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CourierService(
            repository=CourierDjangoRepository(),
            association_repository=AssociationDjangoRepository(),
            establishment_repository=EstablishmentDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    @action(detail=False, methods=["post"], permission_classes=[AllowAny], authentication_classes=[])
    def register(self, request: Request) -> Response:
        """POST /api/v1/entregadores/register"""
        dto = parse_dto(RegisterCourierDTO, request.data)
        courier, token = self._service.register(dto)
        return Response(
            {"entregador": CourierSerializer(courier).data, "token": token},
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["post"], permission_classes=[AllowAny], authentication_classes=[])
    def login(self, request: Request) -> Response:
        """POST /api/v1/entregadores/login"""
        dto = parse_dto(LoginDTO, request.data)
        courier, token = self._service.login(dto)
        return Response({"entregador": CourierSerializer(courier).data, "token": token})

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/entregadores?page&limit"""
        page = self._service.list_couriers(PageRequest.from_query(request.query_params))
        return Response(paginated_payload(page, CourierSerializer))

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/v1/entregadores/{pk}"""
        require_principal(request.user, Role.COURIER, pk)
        return Response(CourierSerializer(self._service.get_courier(pk)).data)

    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/v1/entregadores/{pk}"""
        require_principal(request.user, Role.COURIER, pk)
        dto = parse_dto(UpdateCourierDTO, request.data)
        return Response(CourierSerializer(self._service.update_courier(pk, dto)).data)

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/v1/entregadores/{pk}"""
        require_principal(request.user, Role.COURIER, pk)
        self._service.delete_courier(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Availability / associations
    # ------------------------------------------------------------------

    @action(detail=True, methods=["put"], url_path="disponibilidade")
    def availability(self, request: Request, pk: str) -> Response:
        """PUT /api/v1/entregadores/{pk}/disponibilidade"""
        require_principal(request.user, Role.COURIER, pk)
        dto = parse_dto(AvailabilityDTO, request.data)
        courier = self._service.set_availability(pk, dto.is_available)
        return Response(CourierSerializer(courier).data)

    @action(
        detail=True,
        methods=["post"],
        url_path=rf"estabelecimentos/(?P<establishment_id>{UUID_PATH_REGEX})/associacao",
    )
    def request_association(self, request: Request, pk: str, establishment_id: str) -> Response:
        """POST /api/v1/entregadores/{pk}/estabelecimentos/{establishment_id}/associacao"""
        require_principal(request.user, Role.COURIER, pk)
        association = self._service.request_association(pk, establishment_id)
        return Response(
            CourierAssociationSerializer(association).data,
            status=status.HTTP_201_CREATED,
        )
