"""Restaurant URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.restaurants.views import RestaurantViewSet

router = DefaultRouter(trailing_slash=True)
router.register("restaurants", RestaurantViewSet, basename="restaurant")

urlpatterns = router.urls
