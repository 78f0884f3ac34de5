"""Cart URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.cart.views import CartEntryView, CartView

urlpatterns = [
    path("cart/", CartView.as_view(), name="cart"),
    path("cart/<uuid:pk>/", CartEntryView.as_view(), name="cart_entry"),
]
