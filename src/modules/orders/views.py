"""Order API views.

Customer routes live under ``/clientes/:id``; the access guard runs
before any service call.  Establishment and courier routes take the
acting id from the session token.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.constants import Role
from modules.core.dtos import parse_dto
from modules.core.pagination import PageRequest, paginated_payload
from modules.core.permissions import require_principal, require_role
from modules.couriers.repositories.django_repository import CourierDjangoRepository
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.establishments.repositories.django_repository import (
    AssociationDjangoRepository,
)
from modules.flavors.repositories.django_repository import FlavorDjangoRepository
from modules.orders.dtos import AssignCourierDTO, CreateOrderDTO, UpdateStatusDTO
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer
from modules.orders.services import OrderService


class OrderAPIView(APIView):
    """Wires ``OrderService`` with the Django repositories (DIP)."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            flavor_repository=FlavorDjangoRepository(),
            courier_repository=CourierDjangoRepository(),
            association_repository=AssociationDjangoRepository(),
        )


# ---------------------------------------------------------------------------
# Customer side
# ---------------------------------------------------------------------------


class CustomerOrdersView(OrderAPIView):
    def post(self, request: Request, customer_id: str) -> Response:
        """POST /api/v1/clientes/{customer_id}/pedidos"""
        require_principal(request.user, Role.CUSTOMER, customer_id)
        dto = parse_dto(CreateOrderDTO, request.data)
        order = self._service.create_order(str(customer_id), dto)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


class CustomerOrderDetailView(OrderAPIView):
    def delete(self, request: Request, customer_id: str, order_id: str) -> Response:
        """DELETE /api/v1/clientes/{customer_id}/pedidos/{order_id}"""
        require_principal(request.user, Role.CUSTOMER, customer_id)
        self._service.cancel_order(str(order_id), str(customer_id))
        return Response(status=status.HTTP_204_NO_CONTENT)


class PaymentConfirmationView(OrderAPIView):
    def put(self, request: Request, customer_id: str, order_id: str) -> Response:
        """PUT /api/v1/clientes/{customer_id}/pedidos/{order_id}/pagamento"""
        require_principal(request.user, Role.CUSTOMER, customer_id)
        order = self._service.confirm_payment(str(order_id), str(customer_id))
        return Response(OrderSerializer(order).data)


class DeliveryConfirmationView(OrderAPIView):
    def put(self, request: Request, customer_id: str, order_id: str) -> Response:
        """PUT /api/v1/clientes/{customer_id}/pedidos/{order_id}/confirmar-entrega"""
        require_principal(request.user, Role.CUSTOMER, customer_id)
        order = self._service.confirm_delivery(str(order_id), str(customer_id))
        return Response(OrderSerializer(order).data)


class OrderHistoryView(OrderAPIView):
    def get(self, request: Request, customer_id: str) -> Response:
        """GET /api/v1/clientes/{customer_id}/historico-pedidos?page&limit"""
        require_principal(request.user, Role.CUSTOMER, customer_id)
        page = self._service.list_history(
            str(customer_id), PageRequest.from_query(request.query_params)
        )
        return Response(paginated_payload(page, OrderSerializer))


# ---------------------------------------------------------------------------
# Establishment / courier side
# ---------------------------------------------------------------------------


class OrderDetailView(OrderAPIView):
    def get(self, request: Request, order_id: str) -> Response:
        """GET /api/v1/pedidos/{order_id}"""
        order = self._service.get_order(str(order_id), request.user)
        return Response(OrderSerializer(order).data)


class OrderStatusView(OrderAPIView):
    def put(self, request: Request, order_id: str) -> Response:
        """PUT /api/v1/pedidos/{order_id}/status"""
        require_role(request.user, [Role.ESTABLISHMENT])
        dto = parse_dto(UpdateStatusDTO, request.data)
        order = self._service.update_status(str(order_id), request.user.id, dto.status.value)
        return Response(OrderSerializer(order).data)


class CourierAssignmentView(OrderAPIView):
    def put(self, request: Request, order_id: str) -> Response:
        """PUT /api/v1/entregas/{order_id}/atribuir"""
        require_role(request.user, [Role.ESTABLISHMENT])
        dto = parse_dto(AssignCourierDTO, request.data)
        order = self._service.assign_courier(
            str(order_id), request.user.id, str(dto.courier_id)
        )
        return Response(OrderSerializer(order).data)


class EstablishmentOrdersView(OrderAPIView):
    def get(self, request: Request, establishment_id: str) -> Response:
        """GET /api/v1/estabelecimentos/{establishment_id}/pedidos?page&limit"""
        require_principal(request.user, Role.ESTABLISHMENT, establishment_id)
        page = self._service.list_establishment_orders(
            str(establishment_id), PageRequest.from_query(request.query_params)
        )
        return Response(paginated_payload(page, OrderSerializer))


class CourierDeliveriesView(OrderAPIView):
    def get(self, request: Request, courier_id: str) -> Response:
        """GET /api/v1/entregadores/{courier_id}/entregas?page&limit"""
        require_principal(request.user, Role.COURIER, courier_id)
        page = self._service.list_courier_deliveries(
            str(courier_id), PageRequest.from_query(request.query_params)
        )
        return Response(paginated_payload(page, OrderSerializer))
