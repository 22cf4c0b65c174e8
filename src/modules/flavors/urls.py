"""Flavor URL configuration."""

from __future__ import annotations

from django.urls import path
from rest_framework.routers import SimpleRouter

from modules.core.constants import UUID_PATH_REGEX
from modules.flavors.views import EstablishmentFlavorViewSet, FlavorViewSet, MenuView

router = SimpleRouter(trailing_slash=False)
router.register("sabores", FlavorViewSet, basename="flavor")
router.register(
    rf"estabelecimentos/(?P<establishment_id>{UUID_PATH_REGEX})/sabores",
    EstablishmentFlavorViewSet,
    basename="establishment-flavor",
)

urlpatterns = [
    path("clientes/<uuid:customer_id>/cardapio", MenuView.as_view(), name="menu"),
    *router.urls,
]
