"""Review service layer (Use Cases).

A user may review a restaurant once, and only a restaurant that appears in
one of their own orders.  Every change to the set of stars of a restaurant
recomputes its cached rating through ``RatingAggregator`` inside the same
transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.orders.exceptions import OrderNotFound
from modules.restaurants.exceptions import RestaurantNotFound
from modules.reviews.dtos import RestaurantReviews, ReviewStatistics
from modules.reviews.exceptions import (
    RestaurantNotInOrder,
    ReviewAlreadyExists,
    ReviewNotFound,
)

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.restaurants.repositories.interfaces import IRestaurantRepository
    from modules.reviews.aggregator import RatingAggregator
    from modules.reviews.dtos import CreateReviewDTO, UpdateReviewDTO
    from modules.reviews.models import Review
    from modules.reviews.repositories.interfaces import IReviewRepository

logger = structlog.get_logger(__name__)


class ReviewService:
    def __init__(
        self,
        review_repository: IReviewRepository,
        restaurant_repository: IRestaurantRepository,
        order_repository: IOrderRepository,
        aggregator: RatingAggregator,
    ) -> None:
        self._review_repo = review_repository
        self._restaurant_repo = restaurant_repository
        self._order_repo = order_repository
        self._aggregator = aggregator

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_review(self, user_id: str, dto: CreateReviewDTO) -> Review:
        """Raises:
            OrderNotFound: no order with that number belongs to the user.
            RestaurantNotFound: restaurant does not exist.
            RestaurantNotInOrder: the order has no item from the restaurant.
            ReviewAlreadyExists: the user already reviewed the restaurant.
        """
        log = logger.bind(
            user_id=str(user_id),
            restaurant_id=str(dto.restaurant_id),
            order_number=dto.order_number,
        )

        order = self._order_repo.get_by_number_for_user(dto.order_number, user_id)
        if order is None:
            raise OrderNotFound(attr="order_number")

        restaurant = self._restaurant_repo.get_by_id(str(dto.restaurant_id))
        if restaurant is None:
            raise RestaurantNotFound(attr="restaurant_id")

        if not self._order_repo.has_item_from_restaurant(order.id, restaurant.id):
            log.warning("review.restaurant_not_in_order")
            raise RestaurantNotInOrder(attr="restaurant_id")

        if self._review_repo.exists_for(user_id, restaurant.id):
            raise ReviewAlreadyExists()

        try:
            with transaction.atomic():
                review = self._review_repo.create(
                    {
                        "user_id": user_id,
                        "restaurant_id": restaurant.id,
                        "order_id": order.id,
                        "star": dto.star,
                        "comment": dto.comment,
                    }
                )
        except IntegrityError as exc:
            log.warning("review.duplicate_race")
            raise ReviewAlreadyExists() from exc

        rating = self._aggregator.recompute(restaurant.id)
        log.info("review.created", review_id=str(review.id), star=dto.star, rating=str(rating))
        return self._review_repo.get_by_id(str(review.id)) or review

    @transaction.atomic
    def update_review(self, user_id: str, review_id: str, dto: UpdateReviewDTO) -> Review:
        """Only the author may edit.  The rating is recomputed when the star changes."""
        review = self._get_owned(user_id, review_id)

        star_changed = dto.star is not None and dto.star != review.star
        if dto.star is not None:
            review.star = dto.star
        if dto.comment is not None:
            review.comment = dto.comment
        self._review_repo.save(review)

        if star_changed:
            self._aggregator.recompute(review.restaurant_id)

        logger.info(
            "review.updated",
            review_id=str(review.id),
            user_id=str(user_id),
            star_changed=star_changed,
        )
        return self._review_repo.get_by_id(str(review.id)) or review

    @transaction.atomic
    def delete_review(self, user_id: str, review_id: str) -> None:
        review = self._get_owned(user_id, review_id)
        restaurant_id = review.restaurant_id
        self._review_repo.delete(str(review.id))
        rating = self._aggregator.recompute(restaurant_id)
        logger.info(
            "review.deleted",
            review_id=str(review_id),
            user_id=str(user_id),
            rating=str(rating),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_for_restaurant(
        self, restaurant_id: str, star: Optional[int] = None
    ) -> RestaurantReviews:
        """Reviews of a restaurant, optionally only those with *star* stars.

        ``total_reviews`` counts the filtered reviews; the distribution always
        covers all of them.  Raises ``RestaurantNotFound`` for an unknown
        restaurant.
        """
        restaurant = self._restaurant_repo.get_by_id(str(restaurant_id))
        if restaurant is None:
            raise RestaurantNotFound()

        distribution = self._review_repo.star_distribution(restaurant.id)
        if star is None:
            total = sum(distribution.values())
        else:
            total = distribution.get(star, 0)
        statistics = ReviewStatistics(
            total_reviews=total,
            average_rating=restaurant.rating,
            rating_distribution=distribution,
        )
        return RestaurantReviews(
            restaurant=restaurant,
            reviews=self._review_repo.list_for_restaurant(restaurant.id, star=star),
            statistics=statistics,
        )

    def list_mine(self, user_id: str) -> QuerySet:
        return self._review_repo.list_for_user(user_id)

    def _get_owned(self, user_id: str, review_id: str) -> Review:
        review = self._review_repo.get_for_user(review_id, user_id)
        if review is None:
            raise ReviewNotFound()
        return review
