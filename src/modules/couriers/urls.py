"""Courier URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.couriers.views import CourierViewSet

router = SimpleRouter(trailing_slash=False)
router.register("entregadores", CourierViewSet, basename="courier")

urlpatterns = router.urls
