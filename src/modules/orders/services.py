"""Order service layer (Use Cases).

Orchestrates the order lifecycle.  All write operations are atomic: the
service defines the unit-of-work boundary, and events are delivered only
after commit.

Business rules enforced:
- The owning customer comes from the authenticated principal, never
  from the request body, and never changes.
- Customer-side writes (payment, delivery, cancellation) are scoped to
  ``(order_id, customer_id)``; a miss is ``OrderNotFound``.
- Status moves forward only; re-applying the current status is a no-op.
- Cancellation deletes the order and is allowed only while received or
  in preparation.
- A courier is dispatched only for an establishment that approved it,
  and only while it is available.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.core.constants import Role
from modules.couriers.exceptions import (
    CourierNotApproved,
    CourierNotFound,
    CourierUnavailable,
)
from modules.customers.exceptions import CustomerNotFound
from modules.flavors.exceptions import FlavorNotFound, FlavorUnavailable
from modules.orders.constants import OrderStatus
from modules.orders.exceptions import (
    InvalidOrderStatus,
    OrderNotCancellable,
    OrderNotFound,
)
from modules.orders.models import Order

if TYPE_CHECKING:
    from modules.core.authentication import Principal
    from modules.core.pagination import Page, PageRequest
    from modules.couriers.repositories.interfaces import ICourierRepository
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.establishments.repositories.interfaces import IAssociationRepository
    from modules.flavors.repositories.interfaces import IFlavorRepository
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository | None = None,
        flavor_repository: IFlavorRepository | None = None,
        courier_repository: ICourierRepository | None = None,
        association_repository: IAssociationRepository | None = None,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._flavor_repo = flavor_repository
        self._courier_repo = courier_repository
        self._association_repo = association_repository

    # ------------------------------------------------------------------
    # Customer side
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, customer_id: str, dto: CreateOrderDTO) -> Order:
        """Place an order for one flavor.

        The delivery address falls back to the customer's own address.

        Raises:
            CustomerNotFound: the customer no longer exists.
            FlavorNotFound: unknown flavor.
            FlavorUnavailable: the flavor is switched off.
        """
        log = logger.bind(customer_id=str(customer_id), flavor_id=str(dto.flavor_id))

        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound()

        flavor = self._flavor_repo.get_by_id(str(dto.flavor_id))
        if flavor is None:
            raise FlavorNotFound()
        if not flavor.is_available:
            log.info("order.flavor_unavailable")
            raise FlavorUnavailable()

        order = Order(
            customer=customer,
            flavor=flavor,
            quantity=dto.quantity,
            delivery_address=dto.delivery_address or customer.address,
            payment_method=dto.payment_method.value,
            status=OrderStatus.RECEIVED,
        )
        order.mark_created()
        order = self._order_repo.save(order)
        log.info("order.created", order_id=str(order.id))
        return order

    @transaction.atomic
    def confirm_payment(self, order_id: str, customer_id: str) -> Order:
        """Payment is a status flag: the order moves to PREPARING."""
        order = self._customer_order(order_id, customer_id)
        return self._advance(order, OrderStatus.PREPARING, actor=Role.CUSTOMER)

    @transaction.atomic
    def confirm_delivery(self, order_id: str, customer_id: str) -> Order:
        """Move to DELIVERED; confirming twice leaves the order as it is."""
        order = self._customer_order(order_id, customer_id)
        return self._advance(order, OrderStatus.DELIVERED, actor=Role.CUSTOMER)

    @transaction.atomic
    def cancel_order(self, order_id: str, customer_id: str) -> None:
        """Delete the order.

        Raises:
            OrderNotFound: nothing matched ``(order_id, customer_id)``.
            OrderNotCancellable: the order is past preparation.
        """
        order = self._customer_order(order_id, customer_id)
        log = logger.bind(order_id=str(order_id), current_status=order.status)

        if not order.is_cancellable:
            log.warning("order.cancel_not_allowed")
            raise OrderNotCancellable()

        order.mark_cancelled()
        if not self._order_repo.remove_for_customer(order, customer_id):
            raise OrderNotFound()
        log.info("order.cancelled")

    def list_history(self, customer_id: str, request: PageRequest) -> Page[Order]:
        return self._order_repo.history_for_customer(customer_id, request)

    # ------------------------------------------------------------------
    # Establishment / courier side
    # ------------------------------------------------------------------

    @transaction.atomic
    def update_status(self, order_id: str, establishment_id: str, new_status: str) -> Order:
        """Advance an order for one of the establishment's flavors.

        Raises:
            OrderNotFound: unknown order or another establishment's.
            InvalidOrderStatus: unknown status or a backwards move.
        """
        order = self._order_repo.get_for_establishment(order_id, establishment_id, for_update=True)
        if order is None:
            raise OrderNotFound()
        return self._advance(order, new_status, actor=Role.ESTABLISHMENT)

    @transaction.atomic
    def assign_courier(self, order_id: str, establishment_id: str, courier_id: str) -> Order:
        """Dispatch the order: attach the courier and move to EN_ROUTE.

        Raises:
            OrderNotFound: unknown order or another establishment's.
            CourierNotFound: unknown courier.
            CourierNotApproved: no approved association with the establishment.
            CourierUnavailable: the courier is not taking deliveries.
            InvalidOrderStatus: the order was already delivered.
        """
        log = logger.bind(order_id=str(order_id), courier_id=str(courier_id))

        order = self._order_repo.get_for_establishment(order_id, establishment_id, for_update=True)
        if order is None:
            raise OrderNotFound()

        courier = self._courier_repo.get_for_update(courier_id)
        if courier is None:
            raise CourierNotFound()

        association = self._association_repo.get(courier_id, establishment_id)
        if association is None or not association.is_approved:
            log.warning("order.courier_not_approved")
            raise CourierNotApproved()
        if not courier.is_available:
            log.warning("order.courier_unavailable")
            raise CourierUnavailable()

        order.transition_to(OrderStatus.EN_ROUTE)
        order.courier = courier
        order = self._order_repo.save(order)
        log.info("order.courier_assigned", status=order.status)
        return order

    def list_establishment_orders(self, establishment_id: str, request: PageRequest) -> Page[Order]:
        return self._order_repo.page_for_establishment(establishment_id, request)

    def list_courier_deliveries(self, courier_id: str, request: PageRequest) -> Page[Order]:
        return self._order_repo.page_for_courier(courier_id, request)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str, principal: Principal) -> Order:
        """Visible to its customer, the flavor's establishment and its courier.

        Raises:
            OrderNotFound: unknown order, or not visible to *principal*.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None or not _can_view(order, principal):
            raise OrderNotFound()
        return order

    # ------------------------------------------------------------------

    def _customer_order(self, order_id: str, customer_id: str) -> Order:
        order = self._order_repo.get_for_customer(order_id, customer_id, for_update=True)
        if order is None:
            logger.info(
                "order.not_found",
                order_id=str(order_id),
                customer_id=str(customer_id),
            )
            raise OrderNotFound()
        return order

    def _advance(self, order: Order, new_status: str, *, actor: str) -> Order:
        log = logger.bind(
            order_id=str(order.id),
            current_status=order.status,
            new_status=new_status,
            actor=actor,
        )
        try:
            changed = order.transition_to(new_status)
        except InvalidOrderStatus:
            log.warning("order.invalid_transition")
            raise
        if not changed:
            log.info("order.status_unchanged")
            return order
        order = self._order_repo.save(order)
        log.info("order.status_updated")
        return order


def _can_view(order: Order, principal: Principal) -> bool:
    owner_ids = {
        Role.CUSTOMER.value: order.customer_id,
        Role.ESTABLISHMENT.value: order.establishment_id,
        Role.COURIER.value: order.courier_id,
    }
    owner_id = owner_ids.get(principal.role)
    return owner_id is not None and str(owner_id) == str(principal.id)
