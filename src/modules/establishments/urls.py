"""Establishment URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.establishments.views import EstablishmentViewSet

router = SimpleRouter(trailing_slash=False)
router.register("estabelecimentos", EstablishmentViewSet, basename="establishment")

urlpatterns = router.urls
