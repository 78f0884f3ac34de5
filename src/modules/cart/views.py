"""Cart API views.

``/cart/`` works on the whole cart (read, add, clear); ``/cart/{id}/``
works on a single entry (change quantity, remove).
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.cart.dtos import AddCartItemDTO, UpdateQuantityDTO
from modules.cart.repositories.django_repository import CartDjangoRepository
from modules.cart.serializers import (
    AddCartItemSerializer,
    CartEntrySerializer,
    CartViewSerializer,
    UpdateQuantitySerializer,
)
from modules.cart.services import CartService
from modules.restaurants.repositories.django_repository import RestaurantDjangoRepository


class CartServiceMixin:
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CartService(
            cart_repository=CartDjangoRepository(),
            restaurant_repository=RestaurantDjangoRepository(),
        )


class CartView(CartServiceMixin, APIView):
    def get(self, request: Request) -> Response:
        """GET /api/v1/cart/"""
        cart = self._service.list_grouped(str(request.user.pk))
        return Response(CartViewSerializer(cart).data)

    def post(self, request: Request) -> Response:
        """POST /api/v1/cart/"""
        serializer = AddCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        entry = self._service.add_item(
            str(request.user.pk), AddCartItemDTO(**serializer.validated_data)
        )
        return Response(CartEntrySerializer(entry).data, status=status.HTTP_201_CREATED)

    def delete(self, request: Request) -> Response:
        """DELETE /api/v1/cart/"""
        self._service.clear(str(request.user.pk))
        return Response(status=status.HTTP_204_NO_CONTENT)


class CartEntryView(CartServiceMixin, APIView):
    def put(self, request: Request, pk: str) -> Response:
        """PUT /api/v1/cart/{pk}/"""
        serializer = UpdateQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        entry = self._service.update_quantity(
            str(request.user.pk), pk, UpdateQuantityDTO(**serializer.validated_data)
        )
        return Response(CartEntrySerializer(entry).data)

    patch = put

    def delete(self, request: Request, pk: str) -> Response:
        """DELETE /api/v1/cart/{pk}/"""
        self._service.remove_item(str(request.user.pk), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
