"""Restaurant API views.

Listing and detail are public; recommendations need an authenticated user.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.pagination import StandardResultsSetPagination
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.restaurants.dtos import DetailQueryDTO, LocationSearchDTO
from modules.restaurants.filters import RestaurantFilter
from modules.restaurants.models import Restaurant
from modules.restaurants.repositories.django_repository import RestaurantDjangoRepository
from modules.restaurants.serializers import (
    DetailQuerySerializer,
    LocationSearchSerializer,
    RecommendationSerializer,
    RestaurantDetailSerializer,
    RestaurantListSerializer,
)
from modules.restaurants.services import RestaurantService
from modules.reviews.repositories.django_repository import ReviewDjangoRepository


class RestaurantViewSet(GenericViewSet):
    queryset = Restaurant.objects.all()
    filterset_class = RestaurantFilter
    filter_backends = [DjangoFilterBackend]
    permission_classes = [AllowAny]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = RestaurantService(
            restaurant_repository=RestaurantDjangoRepository(),
            review_repository=ReviewDjangoRepository(),
            order_repository=OrderDjangoRepository(),
        )

    def get_queryset(self):
        return self._service.base_queryset()

    def get_permissions(self):
        if self.action == "recommended":
            return [IsAuthenticated()]
        return super().get_permissions()

    def list(self, request: Request) -> Response:
        """GET /api/v1/restaurants/?rating=&price_min=&price_max=&location=&range="""
        params = LocationSearchSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        search = LocationSearchDTO(
            location=params.validated_data.get("location"),
            range_km=params.validated_data.get("range"),
        )

        queryset = self.filter_queryset(self.get_queryset())
        restaurants = self._service.within_range(queryset, search)

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(restaurants, request, view=self)
        serializer = RestaurantListSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/restaurants/{pk}/?limit_menu=&limit_review="""
        params = DetailQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        detail = self._service.get_restaurant(pk, DetailQueryDTO(**params.validated_data))
        return Response(RestaurantDetailSerializer(detail).data)

    @action(detail=False, methods=["get"])
    def recommended(self, request: Request) -> Response:
        """GET /api/v1/restaurants/recommended/"""
        recommendations = self._service.recommended(str(request.user.pk))
        return Response(
            {"results": RecommendationSerializer(recommendations, many=True).data}
        )
