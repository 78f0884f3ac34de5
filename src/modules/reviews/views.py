"""Review API views.

Writing, editing and deleting reviews needs an authenticated user; the
per-restaurant listing is public.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.pagination import StandardResultsSetPagination
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.restaurants.repositories.django_repository import RestaurantDjangoRepository
from modules.restaurants.serializers import RestaurantSummarySerializer
from modules.reviews.aggregator import RatingAggregator
from modules.reviews.dtos import CreateReviewDTO, UpdateReviewDTO
from modules.reviews.models import Review
from modules.reviews.repositories.django_repository import ReviewDjangoRepository
from modules.reviews.serializers import (
    CreateReviewSerializer,
    MyReviewSerializer,
    RestaurantReviewItemSerializer,
    RestaurantReviewQuerySerializer,
    ReviewSerializer,
    ReviewStatisticsSerializer,
    UpdateReviewSerializer,
)
from modules.reviews.services import ReviewService


class ReviewViewSet(GenericViewSet):
    queryset = Review.objects.all()

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        review_repository = ReviewDjangoRepository()
        restaurant_repository = RestaurantDjangoRepository()
        self._service = ReviewService(
            review_repository=review_repository,
            restaurant_repository=restaurant_repository,
            order_repository=OrderDjangoRepository(),
            aggregator=RatingAggregator(review_repository, restaurant_repository),
        )

    def get_permissions(self):
        if self.action == "for_restaurant":
            return [AllowAny()]
        return super().get_permissions()

    def create(self, request: Request) -> Response:
        """POST /api/v1/reviews/"""
        serializer = CreateReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = self._service.create_review(
            str(request.user.pk), CreateReviewDTO(**serializer.validated_data)
        )
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/reviews/{pk}/"""
        serializer = UpdateReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = self._service.update_review(
            str(request.user.pk), pk, UpdateReviewDTO(**serializer.validated_data)
        )
        return Response(ReviewSerializer(review).data)

    partial_update = update

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/reviews/{pk}/"""
        self._service.delete_review(str(request.user.pk), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"])
    def mine(self, request: Request) -> Response:
        """GET /api/v1/reviews/mine/"""
        queryset = self._service.list_mine(str(request.user.pk))

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(queryset, request, view=self)
        return paginator.get_paginated_response(MyReviewSerializer(page, many=True).data)

    @action(
        detail=False,
        methods=["get"],
        url_path=r"restaurant/(?P<restaurant_id>[^/.]+)",
    )
    def for_restaurant(self, request: Request, restaurant_id: str | None = None) -> Response:
        """GET /api/v1/reviews/restaurant/{restaurant_id}/?star=&page=&limit="""
        params = RestaurantReviewQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        result = self._service.list_for_restaurant(
            restaurant_id, star=params.validated_data.get("star")
        )

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(result.reviews, request, view=self)
        response = paginator.get_paginated_response(
            RestaurantReviewItemSerializer(page, many=True).data
        )
        response.data["restaurant"] = RestaurantSummarySerializer(result.restaurant).data
        response.data["statistics"] = ReviewStatisticsSerializer(result.statistics).data
        return response
