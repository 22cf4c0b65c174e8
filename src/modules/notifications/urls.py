"""Notification URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.notifications.views import (
    CustomerNotificationsView,
    EstablishmentNotificationsView,
)

urlpatterns = [
    path(
        "clientes/<uuid:customer_id>/notificacoes",
        CustomerNotificationsView.as_view(),
        name="customer-notifications",
    ),
    path(
        "estabelecimentos/<uuid:establishment_id>/notificacoes",
        EstablishmentNotificationsView.as_view(),
        name="establishment-notifications",
    ),
]
