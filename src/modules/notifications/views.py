"""Notification API views (each recipient reads only its own inbox)."""

from __future__ import annotations

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.constants import Role
from modules.core.permissions import require_principal
from modules.notifications.repositories.django_repository import (
    NotificationDjangoRepository,
)
from modules.notifications.serializers import NotificationSerializer
from modules.notifications.services import NotificationService


class NotificationAPIView(APIView):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = NotificationService(repository=NotificationDjangoRepository())


class CustomerNotificationsView(NotificationAPIView):
    def get(self, request: Request, customer_id: str) -> Response:
        """GET /api/v1/clientes/{customer_id}/notificacoes"""
        require_principal(request.user, Role.CUSTOMER, customer_id)
        notifications = self._service.list_for_customer(str(customer_id))
        return Response(NotificationSerializer(notifications, many=True).data)


class EstablishmentNotificationsView(NotificationAPIView):
    def get(self, request: Request, establishment_id: str) -> Response:
        """GET /api/v1/estabelecimentos/{establishment_id}/notificacoes"""
        require_principal(request.user, Role.ESTABLISHMENT, establishment_id)
        notifications = self._service.list_for_establishment(str(establishment_id))
        return Response(NotificationSerializer(notifications, many=True).data)
