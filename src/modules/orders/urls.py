"""Order URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.orders import views

urlpatterns = [
    path(
        "clientes/<uuid:customer_id>/pedidos",
        views.CustomerOrdersView.as_view(),
        name="customer-orders",
    ),
    path(
        "clientes/<uuid:customer_id>/pedidos/<uuid:order_id>",
        views.CustomerOrderDetailView.as_view(),
        name="customer-order-detail",
    ),
    path(
        "clientes/<uuid:customer_id>/pedidos/<uuid:order_id>/pagamento",
        views.PaymentConfirmationView.as_view(),
        name="customer-order-payment",
    ),
    path(
        "clientes/<uuid:customer_id>/pedidos/<uuid:order_id>/confirmar-entrega",
        views.DeliveryConfirmationView.as_view(),
        name="customer-order-delivery",
    ),
    path(
        "clientes/<uuid:customer_id>/historico-pedidos",
        views.OrderHistoryView.as_view(),
        name="customer-order-history",
    ),
    path("pedidos/<uuid:order_id>", views.OrderDetailView.as_view(), name="order-detail"),
    path(
        "pedidos/<uuid:order_id>/status",
        views.OrderStatusView.as_view(),
        name="order-status",
    ),
    path(
        "entregas/<uuid:order_id>/atribuir",
        views.CourierAssignmentView.as_view(),
        name="order-assign-courier",
    ),
    path(
        "estabelecimentos/<uuid:establishment_id>/pedidos",
        views.EstablishmentOrdersView.as_view(),
        name="establishment-orders",
    ),
    path(
        "entregadores/<uuid:courier_id>/entregas",
        views.CourierDeliveriesView.as_view(),
        name="courier-deliveries",
    ),
]
