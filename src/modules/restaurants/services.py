"""Restaurant catalog service layer.

Read-only use cases: filtered listing, detail and personalised
recommendations.  Ratings are never written here; see
``modules.reviews.aggregator``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List, Union

import structlog

from modules.restaurants.dtos import Recommendation, RestaurantDetail
from modules.restaurants.exceptions import RestaurantNotFound
from modules.restaurants.geo import distance_from_reference
from modules.reviews.aggregator import mean_rating

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.restaurants.dtos import DetailQueryDTO, LocationSearchDTO
    from modules.restaurants.models import Restaurant
    from modules.restaurants.repositories.interfaces import IRestaurantRepository
    from modules.reviews.repositories.interfaces import IReviewRepository

logger = structlog.get_logger(__name__)

RECOMMENDATION_MIN_RATING = Decimal("4.0")
RECOMMENDATION_CANDIDATES = 20
RECOMMENDATION_LIMIT = 10
SAMPLE_MENUS_PER_RESTAURANT = 3


class RestaurantService:
    def __init__(
        self,
        restaurant_repository: IRestaurantRepository,
        review_repository: IReviewRepository,
        order_repository: IOrderRepository,
    ) -> None:
        self._restaurant_repo = restaurant_repository
        self._review_repo = review_repository
        self._order_repo = order_repository

    def base_queryset(self) -> QuerySet:
        return self._restaurant_repo.list_with_stats()

    def within_range(
        self, restaurants: QuerySet, search: LocationSearchDTO
    ) -> Union[QuerySet, List[Restaurant]]:
        """Keep restaurants within ``range_km`` of the reference point.

        Without an active location filter the queryset is returned untouched.
        Otherwise each kept restaurant gets a ``distance`` attribute (km,
        two decimals) and the result is a list in the queryset's order.
        """
        if not search.active:
            return restaurants

        kept = []
        for restaurant in restaurants:
            distance = distance_from_reference(restaurant.latitude, restaurant.longitude)
            if distance <= search.range_km:
                restaurant.distance = round(distance, 2)
                kept.append(restaurant)

        logger.info(
            "restaurant.location_filtered",
            location=search.location,
            range_km=search.range_km,
            matched=len(kept),
        )
        return kept

    def get_restaurant(self, restaurant_id: str, query: DetailQueryDTO) -> RestaurantDetail:
        """Raises ``RestaurantNotFound`` for unknown ids."""
        restaurant = self._restaurant_repo.get_with_stats(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFound()

        stars = self._review_repo.stars_for_restaurant(restaurant.id)
        return RestaurantDetail(
            restaurant=restaurant,
            menus=self._restaurant_repo.latest_menus(restaurant.id, query.limit_menu),
            reviews=self._review_repo.latest_for_restaurant(
                restaurant.id, query.limit_review
            ),
            average_rating=mean_rating(stars) if stars else restaurant.rating,
            total_menus=restaurant.menu_count,
            total_reviews=restaurant.review_count,
        )

    def recommended(self, user_id: str) -> List[Recommendation]:
        """Well rated restaurants, those the user has not ordered from first."""
        candidates = self._restaurant_repo.top_rated(
            RECOMMENDATION_MIN_RATING, RECOMMENDATION_CANDIDATES
        )
        ordered_from = {str(rid) for rid in self._order_repo.restaurant_ids_for_user(user_id)}

        ranked = sorted(
            candidates,
            key=lambda r: (str(r.id) in ordered_from, -r.rating),
        )[:RECOMMENDATION_LIMIT]

        samples = self._restaurant_repo.sample_menus(
            [r.id for r in ranked], SAMPLE_MENUS_PER_RESTAURANT
        )
        logger.info(
            "restaurant.recommendations_built",
            user_id=str(user_id),
            count=len(ranked),
        )
        return [
            Recommendation(
                restaurant=r,
                previously_ordered=str(r.id) in ordered_from,
                sample_menus=samples.get(str(r.id), []),
            )
            for r in ranked
        ]
